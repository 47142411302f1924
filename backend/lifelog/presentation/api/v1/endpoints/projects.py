"""Project and goal endpoints, plus goal statistics."""

from fastapi import APIRouter, Depends

from lifelog.application.schemas import (
    ApiResponse,
    GoalCreate,
    GoalUpdate,
    ProjectCreate,
    ProjectUpdate,
)
from lifelog.application.services import StatsService
from lifelog.application.services.descriptors import GOAL, PROJECT
from lifelog.infrastructure.dependencies import get_current_user_id, get_stats_service
from lifelog.presentation.api.responses import success
from lifelog.presentation.api.v1.resource_routes import register_resource_routes

projects_router = APIRouter(prefix="/projects", tags=["Projects"])
goals_router = APIRouter(prefix="/goals", tags=["Goals"])


@goals_router.get("/stats", response_model=ApiResponse)
async def goal_stats(
    user_id: str = Depends(get_current_user_id),
    service: StatsService = Depends(get_stats_service),
) -> ApiResponse:
    """Goal counts by status and category, with the overall success rate."""
    return success(await service.goal_stats(user_id))


register_resource_routes(projects_router, PROJECT, ProjectCreate, ProjectUpdate)
register_resource_routes(goals_router, GOAL, GoalCreate, GoalUpdate)

router = APIRouter()
router.include_router(projects_router)
router.include_router(goals_router)
