"""Extract quiz exercises embedded in lesson HTML inside <activities> tags."""

import json
import logging
import re

from aula_click.constants import DEFAULT_EXERCISE_TYPE
from aula_click.models import Exercise

logger = logging.getLogger(__name__)

# Only the first block is honoured
_ACTIVITIES_RE = re.compile(r"<activities>(.*?)</activities>", re.DOTALL)


def _truthy(value) -> bool:
    # JavaScript truthiness: empty objects and arrays count as present
    if value is None or value is False or value == "":
        return False
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value == value and value != 0
    return True


def _is_valid(entry) -> bool:
    return (
        isinstance(entry, dict)
        and _truthy(entry.get("question"))
        and _truthy(entry.get("correct_answer"))
        and _truthy(entry.get("explanation"))
        and isinstance(entry.get("options"), list)
    )


def parse_exercises_from_content(content: str) -> list[Exercise]:
    """Parse the JSON array inside the first <activities> block.

    Returns [] when the block is missing, the JSON is malformed, or the
    payload is not an array. Entries missing question, correct_answer,
    explanation or a list of options are dropped. Never raises.
    """
    if not isinstance(content, str):
        logger.info("No exercise content to parse")
        return []

    match = _ACTIVITIES_RE.search(content)
    if not match:
        logger.info("No <activities> tag found in content")
        return []

    try:
        payload = json.loads(match.group(1).strip())
    except (ValueError, RecursionError) as e:
        logger.warning("Error parsing exercises from content: %s", e)
        return []

    if not isinstance(payload, list):
        logger.info("Activities content is not an array")
        return []

    exercises = []
    for entry in payload:
        if not _is_valid(entry):
            logger.debug("Dropping malformed exercise entry: %r", entry)
            continue
        exercises.append(Exercise(
            type=entry["type"] if _truthy(entry.get("type")) else DEFAULT_EXERCISE_TYPE,
            question=entry["question"],
            options=entry["options"],
            correct_answer=entry["correct_answer"],
            explanation=entry["explanation"],
        ))

    dropped = len(payload) - len(exercises)
    if dropped:
        logger.warning("Dropped %d malformed exercise(s)", dropped)
    return exercises


def clean_content_from_exercises(content: str) -> str:
    """Remove the first <activities> block and trim the result."""
    return _ACTIVITIES_RE.sub("", content, count=1).strip()
