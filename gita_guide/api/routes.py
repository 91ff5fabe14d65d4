from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from typing import Annotated

from .schemas import InsightResponse, QueryRequest
from .dependencies import get_pipeline
from gita_guide.core.config import get_settings
from gita_guide.insight.models import ErrorKind, InsightOk
from gita_guide.insight.pipeline import InsightPipeline


router = APIRouter(
    prefix=f"/api{get_settings().API_VERSION}", tags=["Gita Guide"])

ERROR_STATUS = {
    ErrorKind.CONFIGURATION: status.HTTP_503_SERVICE_UNAVAILABLE,
}


@router.post(
    "/insight",
    response_model=InsightResponse,
    responses={
        502: {
            "model": InsightResponse,
            "description": "The backend failed or returned an unusable reply"
        },
        503: {
            "model": InsightResponse,
            "description": "No backend API key is configured"
        },
    },
)
async def insight(
    request: QueryRequest,
    pipeline: Annotated[InsightPipeline, Depends(get_pipeline)],
):
    """
    Return one verse of guidance for the submitted problem.
    """
    result = await pipeline.run(request.query)

    if isinstance(result, InsightOk):
        return InsightResponse(result=result.insight)

    return JSONResponse(
        status_code=ERROR_STATUS.get(
            result.kind, status.HTTP_502_BAD_GATEWAY),
        content=InsightResponse(
            error=result.message,
            error_kind=result.kind,
        ).model_dump(mode="json"),
    )
