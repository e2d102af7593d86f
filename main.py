from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging
from dotenv import load_dotenv

from commentbank.routes import router as comments_router

load_dotenv()

logging.basicConfig(level=logging.INFO)
logging.info("App starting with comment bank")

app = FastAPI(title="Report Comment Bank")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(comments_router)


@app.get("/")
def root():
    return {"service": "report-comment-bank", "status": "ok"}
