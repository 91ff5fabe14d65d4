import asyncio
import json

import httpx
import pytest

from gita_guide.insight.fetcher import InsightFetcher


@pytest.fixture
def fake_groq_url():
    return "http://fake-groq:9999/openai/v1"


@pytest.fixture
def sample_insight_data():
    return {
        "shloka": "कर्मण्येवाधिकारस्ते मा फलेषु कदाचन",
        "reference": "Chapter 2, Verse 47",
        "translation": "You have a right to perform your prescribed duty, "
                       "but you are not entitled to the fruits of action.",
        "wisdom": "Your worry comes from clinging to the outcome.",
        "actionable_advice": "1. Pick one task. 2. Do it fully. 3. Let go of the result.",
    }


def completion_body(content):
    return {
        "id": "chatcmpl-test",
        "object": "chat.completion",
        "choices": [
            {"index": 0, "message": {"role": "assistant", "content": content}}
        ],
    }


class FakeBackend:
    """Records every request and answers with a canned response"""

    def __init__(self):
        self.requests = []
        self.status_code = 200
        self.body = completion_body("")
        self.raw_body = None
        self.exception = None

    def reply_with_content(self, content):
        self.status_code = 200
        self.body = completion_body(content)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.exception is not None:
            raise self.exception
        if self.raw_body is not None:
            return httpx.Response(self.status_code, content=self.raw_body)
        return httpx.Response(self.status_code, json=self.body)

    @property
    def call_count(self):
        return len(self.requests)

    def last_json(self):
        return json.loads(self.requests[-1].content)


@pytest.fixture
def fake_backend():
    return FakeBackend()


@pytest.fixture
def make_fetcher(fake_backend, fake_groq_url):
    """Build fetchers whose HTTP traffic goes to the fake backend"""
    clients = []

    def factory(api_key="gsk_test_key", **kwargs):
        client = httpx.AsyncClient(
            transport=httpx.MockTransport(fake_backend.handler))
        clients.append(client)
        return InsightFetcher(
            api_key=api_key,
            base_url=fake_groq_url,
            http_client=client,
            **kwargs,
        )

    yield factory

    loop = asyncio.new_event_loop()
    try:
        for client in clients:
            loop.run_until_complete(client.aclose())
    finally:
        loop.close()
