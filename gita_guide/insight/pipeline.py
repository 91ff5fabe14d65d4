from typing import Callable
import logging

from gita_guide.insight.builder import build_prompt
from gita_guide.insight.errors import InsightError
from gita_guide.insight.fetcher import InsightFetcher
from gita_guide.insight.models import InsightErr, InsightOk, InsightResult, Prompt

logger = logging.getLogger(__name__)


class InsightPipeline:
    """Prompt building, fetching and extraction for a single query.

    Every classified failure comes back as an ``InsightErr`` value rather
    than an exception, so callers branch on the result type. Unclassified
    exceptions propagate.
    """

    def __init__(
        self,
        fetcher: InsightFetcher,
        builder: Callable[[str], Prompt] = build_prompt,
    ):
        self.fetcher = fetcher
        self.builder = builder

    async def run(self, query: str) -> InsightResult:
        if not query or not query.strip():
            raise ValueError("Query must not be empty")

        prompt = self.builder(query)
        try:
            insight = await self.fetcher.fetch(prompt)
        except InsightError as e:
            logger.warning("Insight request failed (%s): %s",
                           e.kind.value, e.message)
            return InsightErr(kind=e.kind, message=e.message)

        logger.info("Insight retrieved: %s", insight.reference)
        return InsightOk(insight=insight)
