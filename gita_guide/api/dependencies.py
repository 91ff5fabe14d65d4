from typing import AsyncIterator

from fastapi import Depends
from gita_guide.core.config import get_settings, Settings
from gita_guide.insight.fetcher import InsightFetcher
from gita_guide.insight.pipeline import InsightPipeline


def get_settings_dependency() -> Settings:
    return get_settings()


async def get_fetcher(
    settings: Settings = Depends(get_settings_dependency),
) -> AsyncIterator[InsightFetcher]:
    async with InsightFetcher(**settings.groq_config) as fetcher:
        yield fetcher


def get_pipeline(
    fetcher: InsightFetcher = Depends(get_fetcher),
) -> InsightPipeline:
    return InsightPipeline(fetcher=fetcher)
