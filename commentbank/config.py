import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

PACKAGE_DIR = Path(__file__).resolve().parent

COMMENT_BANK_PATH = os.getenv(
    "COMMENT_BANK_PATH",
    str(PACKAGE_DIR / "data" / "comment_bank.json"),
)

# Offline comment bank is the default; set to "false" to try the AI generator first
USE_COMMENT_BANK = os.getenv("USE_COMMENT_BANK", "true").strip().lower() != "false"

OPENAI_API_KEY = os.getenv("OPENAI_API_KEY")
OPENAI_MODEL = os.getenv("OPENAI_MODEL", "gpt-4o-mini")

COMMENT_BATCH_WORKERS = int(os.getenv("COMMENT_BATCH_WORKERS", "1"))
