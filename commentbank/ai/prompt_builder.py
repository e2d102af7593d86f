from typing import Iterable, List
import json
from .style_rules import STYLE_RULES, SYSTEM_ROLE_DEFINITION, JSON_OUTPUT_FORMAT_INSTRUCTION

# Cap on used texts echoed back to the model
MAX_AVOID_ITEMS = 20


def build_system_prompt() -> str:
    """Constructs the static system prompt."""
    rules_str = "\n".join([f"- {rule}" for rule in STYLE_RULES])

    return f"""{SYSTEM_ROLE_DEFINITION}

STYLE RULES (NON-NEGOTIABLE):
{rules_str}

OUTPUT FORMAT:
{JSON_OUTPUT_FORMAT_INSTRUCTION}
"""


def build_user_prompt(
    subject: str,
    band: str,
    category: str,
    trend: str,
    strength_tags: Iterable[str] = (),
    weakness_tags: Iterable[str] = (),
    avoid: Iterable[str] = (),
) -> str:
    """
    Constructs the user prompt for one subject.
    Truncates the already-used list to save tokens.
    """
    performance = {
        "subject": subject,
        "subject_category": category,
        "performance_band": band,
        "trend": trend,
        "strengths": list(strength_tags),
        "weaknesses": list(weakness_tags),
    }

    already_used: List[str] = sorted(avoid)[:MAX_AVOID_ITEMS]

    return f"""
SUBJECT PERFORMANCE:
{json.dumps(performance, indent=2)}

ALREADY USED (do not repeat):
{json.dumps(already_used, indent=2)}

TASK:
Write the subject remark and teacher comment. Adhere strictly to the style rules.
"""
