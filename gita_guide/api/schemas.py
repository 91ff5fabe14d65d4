from pydantic import BaseModel, Field, field_validator

from gita_guide.insight.models import ErrorKind, Insight


class QueryRequest(BaseModel):
    query: str = Field(..., min_length=1, max_length=4000,
                       description="The problem or doubt to seek guidance on")

    @field_validator("query")
    @classmethod
    def query_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("query must not be blank")
        return value


class InsightResponse(BaseModel):
    result: Insight | None = None
    error: str | None = None
    error_kind: ErrorKind | None = None
