from gita_guide.core.prompts import GITA_GUIDE_PROMPT
from gita_guide.insight.models import Prompt


def build_prompt(query: str) -> Prompt:
    """Pair the fixed guide instruction with the user's query, verbatim."""
    return Prompt(instruction=GITA_GUIDE_PROMPT, query=query)
