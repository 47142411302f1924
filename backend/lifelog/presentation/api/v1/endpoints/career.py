"""Career endpoints — activities and job applications."""

from fastapi import APIRouter

from lifelog.application.schemas import (
    CareerActivityCreate,
    CareerActivityUpdate,
    JobApplicationCreate,
    JobApplicationUpdate,
)
from lifelog.application.services.descriptors import CAREER_ACTIVITY, JOB_APPLICATION
from lifelog.presentation.api.v1.resource_routes import register_resource_routes

activities_router = APIRouter(prefix="/career/activities", tags=["Career"])
applications_router = APIRouter(prefix="/career/applications", tags=["Career"])

register_resource_routes(
    activities_router, CAREER_ACTIVITY, CareerActivityCreate, CareerActivityUpdate
)
register_resource_routes(
    applications_router, JOB_APPLICATION, JobApplicationCreate, JobApplicationUpdate
)

router = APIRouter()
router.include_router(activities_router)
router.include_router(applications_router)
