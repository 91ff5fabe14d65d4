"""
Pull an Insight out of free-form generated text.

The backend is asked for bare JSON but may still wrap it in markdown fences
or surround it with prose. The candidate text is chosen in a fixed order:

1. the interior of the first fence tagged ``json``;
2. otherwise the interior of the first fence of any kind (an info-string
   tag on the opening line is dropped);
3. otherwise the whole reply.

The candidate must parse as a JSON object holding every insight field as a
non-blank string. No other recovery is attempted.
"""
import json
import logging
import re
from typing import Any, Dict

from gita_guide.insight.errors import IncompleteResponseError, MalformedResponseError
from gita_guide.insight.models import INSIGHT_FIELDS, Insight

logger = logging.getLogger(__name__)

JSON_FENCE = re.compile(r"```json[ \t]*\r?\n(.*?)```", re.IGNORECASE | re.DOTALL)
ANY_FENCE = re.compile(r"```[ \t]*[\w+.-]*[ \t]*\r?\n?(.*?)```", re.DOTALL)

MALFORMED_MESSAGE = "The backend reply could not be parsed as a JSON object."


def candidate_text(raw: str) -> str:
    """Return the part of ``raw`` that should hold the JSON object."""
    match = JSON_FENCE.search(raw) or ANY_FENCE.search(raw)
    if match:
        return match.group(1)
    return raw


def _missing_fields(data: Dict[str, Any]) -> list[str]:
    missing = []
    for name in INSIGHT_FIELDS:
        value = data.get(name)
        if not isinstance(value, str) or not value.strip():
            missing.append(name)
    return missing


def extract(raw: str) -> Insight:
    """
    Parse and validate an Insight from a raw backend reply.

    Raises:
        MalformedResponseError: When the candidate text is not a JSON object
        IncompleteResponseError: When required fields are missing or empty
    """
    text = candidate_text(raw).strip()

    try:
        data = json.loads(text)
    except (ValueError, RecursionError) as e:
        logger.debug("Unparseable candidate text: %.200s", text)
        raise MalformedResponseError(MALFORMED_MESSAGE) from e

    if not isinstance(data, dict):
        raise MalformedResponseError(MALFORMED_MESSAGE)

    missing = _missing_fields(data)
    if missing:
        raise IncompleteResponseError(missing)

    return Insight.model_validate({name: data[name] for name in INSIGHT_FIELDS})
