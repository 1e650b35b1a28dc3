import logging

from fastapi import APIRouter, Depends, Query, Request, Response
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from ..config import CORS_HEADERS, INSIGHTS_ERROR_MESSAGE
from ..database import get_db
from .. import services, schemas

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Insights"])


@router.options("/ai-insights")
async def insights_preflight():
    return Response(status_code=200, headers=CORS_HEADERS)


@router.post("/ai-insights", response_model=schemas.InsightResponse)
async def generate_insights(request: Request):
    """
    Stateless insight generation.

    Body: {"transactions": [...], "timeframe": "week" | "month" | "year"}
    The caller is expected to pre-filter transactions to the timeframe.
    Any malformed body yields a 500 with a fixed error message.
    """
    try:
        body = await request.json()
        payload = schemas.InsightRequest.model_validate(body)
        result = services.compute_insights(payload.transactions, payload.timeframe)
    except Exception:
        logger.exception("[INSIGHTS] Error generating insights")
        return JSONResponse(
            status_code=500,
            content={"error": INSIGHTS_ERROR_MESSAGE},
            headers=CORS_HEADERS,
        )

    # Non-finite totals serialize as null, as JSON.stringify does
    return Response(
        content=result.model_dump_json(by_alias=True),
        media_type="application/json",
        headers=CORS_HEADERS,
    )


@router.get("/users/{user_id}/insights", response_model=schemas.InsightResponse)
async def get_user_insights(
    user_id: str,
    timeframe: schemas.Timeframe = Query(schemas.Timeframe.MONTH),
    db: AsyncSession = Depends(get_db)
):
    """Insights for the user's stored transactions in the current timeframe."""
    transactions = await services.load_transactions(db, user_id)
    result = await services.fetch_insights(transactions, timeframe)
    return Response(content=result.model_dump_json(by_alias=True), media_type="application/json")
