"""Plan router - free-text prompt in, single-brand hotel plan out."""

import logging

from fastapi import APIRouter, Depends, HTTPException

from stayplanner.dependencies import enforce_rate_limit, get_plan_orchestrator
from stayplanner.errors import NoBrandCandidatesError, NoCandidatesError
from stayplanner.schemas.plan import PlanOption, PlanRequest
from stayplanner.services.plan_orchestrator import PlanOrchestrator

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("", response_model=PlanOption, dependencies=[Depends(enforce_rate_limit)])
async def create_plan(
    req: PlanRequest,
    orchestrator: PlanOrchestrator = Depends(get_plan_orchestrator),
):
    """Build a ranked hotel plan for a natural-language travel request."""
    try:
        return await orchestrator.plan_trip(req.prompt)
    except (NoCandidatesError, NoBrandCandidatesError) as e:
        raise HTTPException(status_code=404, detail=e.user_message)
    except Exception:
        logger.exception("Plan request failed")
        raise HTTPException(status_code=500, detail="Internal server error")
