"""In-process insight generation with a remote-first strategy.

The caller owns the reporting window: transactions are filtered to the
timeframe and truncated to the most recent records before either path runs.
When a remote insights endpoint is configured it is tried once; any failure
falls back to the local engine. There is no retry.
"""

import logging
from datetime import date
from typing import Iterable, List, Optional

import httpx
from pydantic import ValidationError

from .. import config
from ..schemas.insights import InsightResponse, Timeframe, TransactionIn
from .insights import compute_insights
from .periods import period_start

logger = logging.getLogger(__name__)


def filter_to_timeframe(
    transactions: Iterable[TransactionIn],
    timeframe: Timeframe,
    today: date,
) -> List[TransactionIn]:
    """Keeps transactions dated on or after the start of the current period."""
    start = period_start(Timeframe(timeframe).value, today)
    return [t for t in transactions if t.date.date() >= start]


def _recent_window(transactions: List[TransactionIn], limit: int) -> List[TransactionIn]:
    # Newest first by wall-clock time; offsets may be mixed
    ordered = sorted(transactions, key=lambda t: t.date.replace(tzinfo=None), reverse=True)
    return ordered[:limit]


async def _request_remote(
    client: httpx.AsyncClient,
    transactions: List[TransactionIn],
    timeframe: Timeframe,
) -> Optional[InsightResponse]:
    headers = {"Content-Type": "application/json"}
    if config.INSIGHTS_SERVICE_KEY:
        headers["Authorization"] = f"Bearer {config.INSIGHTS_SERVICE_KEY}"

    payload = {
        "transactions": [t.model_dump(mode="json") for t in transactions],
        "timeframe": Timeframe(timeframe).value,
    }

    try:
        response = await client.post(config.INSIGHTS_SERVICE_URL, json=payload, headers=headers)
    except httpx.HTTPError as e:
        logger.warning(f"[INSIGHTS] Remote request failed: {e}")
        return None

    if response.status_code != 200:
        logger.warning(f"[INSIGHTS] Remote returned {response.status_code}, using local engine")
        return None

    try:
        return InsightResponse.model_validate(response.json())
    except (ValueError, ValidationError) as e:
        logger.warning(f"[INSIGHTS] Unreadable remote response: {e}")
        return None


async def fetch_insights(
    transactions: Iterable[TransactionIn],
    timeframe: Timeframe = Timeframe.MONTH,
    today: Optional[date] = None,
    client: Optional[httpx.AsyncClient] = None,
) -> InsightResponse:
    """Insights for the current timeframe window.

    Args:
        transactions: Candidate transactions, any order, any date range
        timeframe: Reporting window; also used in insight wording
        today: Reference date for the window (defaults to today)
        client: Optional httpx client, mainly for tests

    Returns:
        The remote result when it succeeds, otherwise the local computation
    """
    today = today or date.today()
    window = filter_to_timeframe(transactions, timeframe, today)
    window = _recent_window(window, config.INSIGHTS_MAX_TRANSACTIONS)

    if config.INSIGHTS_SERVICE_URL:
        if client is not None:
            result = await _request_remote(client, window, timeframe)
        else:
            async with httpx.AsyncClient(timeout=config.INSIGHTS_TIMEOUT) as own_client:
                result = await _request_remote(own_client, window, timeframe)
        if result is not None:
            return result

    logger.debug(f"[INSIGHTS] Computing locally for {len(window)} transactions")
    return compute_insights(window, timeframe)
