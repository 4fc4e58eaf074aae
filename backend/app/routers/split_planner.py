"""
Split Planner Router
====================
POST /api/v1/split-planner/weekly-template     — Lay out a training week.
POST /api/v1/split-planner/prompt-constraints  — Format one day for the AI generator.

Both endpoints are stateless wrappers around pure functions: nothing is
read from or written to the database. The profile subsystem assembles
the SplitPlannerInput from onboarding data and the workout generator
consumes the result.

Range errors on the body (frequency outside 1-7, non-positive session
duration) are rejected by Pydantic with a 422 before the planner runs.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, status

from app.models.split_plan import (
    PromptConstraintsRequest,
    PromptConstraintsResponse,
    SplitPlannerInput,
    WeeklyTemplate,
)
from app.services.prompt_constraints import format_constraints
from app.services.split_planner import SplitPlannerValidationError, generate_weekly_template

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/split-planner", tags=["split-planner"])


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

@router.post(
    "/weekly-template",
    response_model=WeeklyTemplate,
    status_code=status.HTTP_200_OK,
    summary="Generate a weekly split template",
    description=(
        "Decides which days of the week get which training focus, how many "
        "exercises each gym day holds, and which days are taken by the "
        "user's own fixed activities or rest. Deterministic for a given input."
    ),
    responses={
        200: {"description": "Seven-day template returned"},
        422: {"description": "Validation error (frequency, session duration, day indices)"},
    },
)
async def create_weekly_template(body: SplitPlannerInput) -> WeeklyTemplate:
    """Generate the weekly template for the submitted planner input."""
    try:
        return generate_weekly_template(body)
    except SplitPlannerValidationError as exc:
        logger.warning("Rejected planner input: %s", exc)
        raise HTTPException(
            status_code=422,
            detail={"message": str(exc), "code": "invalid_planner_input"},
        ) from exc


@router.post(
    "/prompt-constraints",
    response_model=PromptConstraintsResponse,
    status_code=status.HTTP_200_OK,
    summary="Format one day's constraints for the AI workout generator",
    responses={
        200: {"description": "Constraint text returned"},
        422: {"description": "Malformed day plan"},
    },
)
async def create_prompt_constraints(body: PromptConstraintsRequest) -> PromptConstraintsResponse:
    """Format a single DayPlan as steering text."""
    return PromptConstraintsResponse(
        day_index=body.day_plan.day_index,
        focus=body.day_plan.focus,
        constraints=format_constraints(body.day_plan, body.experience),
    )
