from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Annotated, Dict, List, Tuple, Union

from pydantic import AfterValidator, BaseModel, ConfigDict, Field


INSIGHT_FIELDS: Tuple[str, ...] = (
    "shloka",
    "reference",
    "translation",
    "wisdom",
    "actionable_advice",
)


def _not_blank(value: str) -> str:
    if not value.strip():
        raise ValueError("must not be blank")
    return value


NonBlankStr = Annotated[str, AfterValidator(_not_blank)]


class ErrorKind(str, Enum):
    """Classified failures of one insight request."""
    CONFIGURATION = "configuration"
    BACKEND = "backend"
    EMPTY_RESPONSE = "empty_response"
    MALFORMED_RESPONSE = "malformed_response"
    INCOMPLETE_RESPONSE = "incomplete_response"


class Insight(BaseModel):
    """A single verse of guidance with its explanation"""

    model_config = ConfigDict(frozen=True, extra="ignore")

    shloka: NonBlankStr = Field(..., description="Source-language verse text")
    reference: NonBlankStr = Field(..., description="Chapter and verse locator")
    translation: NonBlankStr = Field(..., description="English translation")
    wisdom: NonBlankStr = Field(
        ..., description="How the verse applies to the problem")
    actionable_advice: NonBlankStr = Field(
        ..., description="Practical steps for today")


class Prompt(BaseModel):
    """Instruction text plus the user's query, as sent to the backend"""

    model_config = ConfigDict(frozen=True)

    instruction: str
    query: str

    @property
    def messages(self) -> List[Dict[str, str]]:
        return [
            {"role": "system", "content": self.instruction},
            {"role": "user", "content": self.query},
        ]


@dataclass(frozen=True)
class InsightOk:
    insight: Insight


@dataclass(frozen=True)
class InsightErr:
    kind: ErrorKind
    message: str


InsightResult = Union[InsightOk, InsightErr]
