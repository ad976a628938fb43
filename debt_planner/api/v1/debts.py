"""GET /v1/debts* - Debt list, summary, payoff plan and strategy comparison"""

import asyncio
import time
import logging
from typing import Any, Dict, Optional
from fastapi import APIRouter, Depends, HTTPException, Query, Request

from debt_planner.api.v1.schemas import (
    ComparisonResponse,
    DebtItemSchema,
    DebtListResponse,
    DebtSummaryResponse,
    PayoffPlanResponse,
)
from debt_planner.api.dependencies import get_debt_source, get_request_id
from debt_planner.config import settings
from debt_planner.domain.aggregation import DebtSource, aggregate_debts
from debt_planner.domain.comparison import compare_strategies_concurrently, plan_for_strategy
from debt_planner.domain.exceptions import DataUnavailableError, InvalidStrategyError
from debt_planner.domain.strategies import DEFAULT_STRATEGY, get_strategy
from debt_planner.domain.summary import calculate_summary
from debt_planner.infrastructure.observability.metrics import (
    debt_source_failures_counter,
    record_plan,
    record_recommendation,
)
from debt_planner.infrastructure.observability.logging import log_plan

router = APIRouter()


def _simulation_options() -> Dict[str, Any]:
    return {
        "accelerator": settings.payment_accelerator,
        "max_months": settings.max_simulation_months,
        "paid_off_epsilon": settings.paid_off_epsilon,
        "interest_decimals": settings.interest_decimals,
    }


async def _load_debts(source: DebtSource, user_id: str, request_id: str):
    try:
        return await aggregate_debts(
            source,
            user_id,
            min_payment_rate=settings.revolving_min_payment_rate,
            min_payment_floor=settings.revolving_min_payment_floor,
        )
    except DataUnavailableError as e:
        debt_source_failures_counter.inc()
        logging.error(f"Debt data unavailable: {e}", extra={"request_id": request_id, "user_id": user_id})
        raise HTTPException(status_code=503, detail="Debt data unavailable")


@router.get("/debts", response_model=DebtListResponse)
async def list_debts(
    request: Request,
    user_id: str = Query(..., min_length=1, description="User identifier"),
    source: DebtSource = Depends(get_debt_source),
):
    """Return every debt with an outstanding balance, loans first"""
    debts = await _load_debts(source, user_id, get_request_id(request))
    return DebtListResponse(user_id=user_id, debts=[DebtItemSchema.from_domain(d) for d in debts])


@router.get("/debts/summary", response_model=DebtSummaryResponse)
async def get_summary(
    request: Request,
    user_id: str = Query(..., min_length=1, description="User identifier"),
    source: DebtSource = Depends(get_debt_source),
):
    """
    Aggregate totals without simulation.

    debt_free_months is null (and pays_off_at_minimum false) when some debt's
    minimum payment never covers its interest.
    """
    debts = await _load_debts(source, user_id, get_request_id(request))
    return DebtSummaryResponse.from_domain(user_id, calculate_summary(debts))


@router.get("/debts/plan", response_model=PayoffPlanResponse)
async def get_plan(
    request: Request,
    user_id: str = Query(..., min_length=1, description="User identifier"),
    strategy: str = Query(DEFAULT_STRATEGY, description="snowball | avalanche | highest_balance"),
    payment: Optional[float] = Query(None, gt=0, description="Monthly budget; default is minimums + 10%"),
    source: DebtSource = Depends(get_debt_source),
):
    """
    Simulate payoff for one strategy.

    Flow:
    1. Reject unknown strategies before touching the store
    2. Aggregate debts
    3. Simulate month by month
    4. Record metrics and logs
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        get_strategy(strategy)
    except InvalidStrategyError as e:
        logging.warning(str(e), extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    debts = await _load_debts(source, user_id, request_id)

    try:
        plan = plan_for_strategy(debts, strategy, payment, **_simulation_options())
    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    duration_ms = (time.time() - start_time) * 1000
    record_plan(plan.strategy, plan.months_to_debt_free, plan.converged)
    log_plan(request_id, user_id, plan.strategy, plan.months_to_debt_free, plan.converged, duration_ms)

    return PayoffPlanResponse.from_domain(plan)


@router.get("/debts/compare", response_model=ComparisonResponse)
async def compare(
    request: Request,
    user_id: str = Query(..., min_length=1, description="User identifier"),
    payment: Optional[float] = Query(None, gt=0, description="Monthly budget; default is minimums + 10%"),
    source: DebtSource = Depends(get_debt_source),
):
    """Simulate every strategy concurrently and recommend one"""
    start_time = time.time()
    request_id = get_request_id(request)

    debts = await _load_debts(source, user_id, request_id)

    try:
        comparison = await asyncio.wait_for(
            compare_strategies_concurrently(debts, payment, **_simulation_options()),
            timeout=settings.compare_timeout_seconds,
        )
    except asyncio.TimeoutError:
        logging.error(
            f"Strategy comparison exceeded {settings.compare_timeout_seconds}s",
            extra={"request_id": request_id, "debt_count": len(debts)},
        )
        raise HTTPException(status_code=504, detail="Strategy comparison timed out")
    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    duration_ms = (time.time() - start_time) * 1000
    for plan in comparison.strategies.values():
        record_plan(plan.strategy, plan.months_to_debt_free, plan.converged)
        log_plan(request_id, user_id, plan.strategy, plan.months_to_debt_free, plan.converged, duration_ms)
    record_recommendation(comparison.recommendation.strategy, comparison.recommendation.rule.value)

    return ComparisonResponse.from_domain(user_id, comparison)
