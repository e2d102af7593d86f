import json
import logging
from typing import Dict, Iterable, Optional, Tuple
import openai

from .. import config
from .prompt_builder import build_system_prompt, build_user_prompt

logger = logging.getLogger(__name__)

CACHE_MAX_ENTRIES = 256


class AICommentGenerator:
    """
    Optional AI path for a single subject's remark and comment.

    Only used when the caller turns the comment bank off. Any failure returns
    None so the caller can fall back to the comment bank.
    """

    def __init__(self, api_key: Optional[str] = None, model: Optional[str] = None):
        self.api_key = api_key or config.OPENAI_API_KEY
        self.client = None
        if self.api_key:
            self.client = openai.OpenAI(api_key=self.api_key)

        self.model = model or config.OPENAI_MODEL
        self.max_tokens = 200
        self.temperature = 0.4

        # Simple in-memory cache: request key -> response, oldest entry evicted first
        self.cache: Dict[Tuple, Dict[str, str]] = {}
        self.cache_size = CACHE_MAX_ENTRIES

    @property
    def enabled(self) -> bool:
        return self.client is not None

    def generate(
        self,
        subject: str,
        band: str,
        category: str,
        trend: str,
        strength_tags: Iterable[str] = (),
        weakness_tags: Iterable[str] = (),
        avoid: Iterable[str] = (),
    ) -> Optional[Dict[str, str]]:
        """
        Generates a remark/comment pair for one subject.
        Returns None if API key is missing or error occurs.
        The caller is responsible for validating the returned text.
        """
        if not self.client:
            logger.warning("OpenAI API key not found. Skipping AI comment generation.")
            return None

        strength_tags = tuple(strength_tags)
        weakness_tags = tuple(weakness_tags)
        avoid = frozenset(avoid)

        # avoid is left out of the key; a cached pair it rules out is regenerated
        key = (subject, band, category, trend, strength_tags, weakness_tags)
        cached = self.cache.get(key)
        if cached is not None and not avoid.intersection(cached.values()):
            return cached

        system_prompt = build_system_prompt()
        user_prompt = build_user_prompt(
            subject, band, category, trend, strength_tags, weakness_tags, avoid
        )

        try:
            response = self.client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_prompt}
                ],
                temperature=self.temperature,
                max_tokens=self.max_tokens,
                response_format={"type": "json_object"}
            )

            content = response.choices[0].message.content
            if not content:
                return None

            parsed = json.loads(content)
            remark = parsed.get("subject_remark")
            comment = parsed.get("teacher_comment")
            if not isinstance(remark, str) or not isinstance(comment, str):
                logger.warning(f"AI response for {subject} is missing remark or comment")
                return None

            result = {"subject_remark": remark.strip(), "teacher_comment": comment.strip()}

            self._remember(key, result)

            return result

        except (openai.OpenAIError, json.JSONDecodeError, AttributeError, IndexError) as e:
            logger.error(f"Error generating AI comment for {subject}: {e}")
            return None

    def _remember(self, key: Tuple, result: Dict[str, str]) -> None:
        self.cache.pop(key, None)
        if len(self.cache) >= self.cache_size:
            del self.cache[next(iter(self.cache))]
        self.cache[key] = result


_generator: Optional[AICommentGenerator] = None


def get_ai_generator() -> AICommentGenerator:
    """Shared generator instance, created on first use."""
    global _generator
    if _generator is None:
        _generator = AICommentGenerator()
    return _generator
