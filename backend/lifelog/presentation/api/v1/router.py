"""V1 API router — aggregates all v1 endpoint routers."""

from fastapi import APIRouter

from lifelog.presentation.api.v1.endpoints.health import router as health_router
from lifelog.presentation.api.v1.endpoints.users import router as users_router
from lifelog.presentation.api.v1.endpoints.daily_logs import router as daily_logs_router
from lifelog.presentation.api.v1.endpoints.ielts import router as ielts_router
from lifelog.presentation.api.v1.endpoints.journals import router as journals_router
from lifelog.presentation.api.v1.endpoints.books import router as books_router
from lifelog.presentation.api.v1.endpoints.skills import router as skills_router
from lifelog.presentation.api.v1.endpoints.workouts import router as workouts_router
from lifelog.presentation.api.v1.endpoints.wellness import router as wellness_router
from lifelog.presentation.api.v1.endpoints.financial import router as financial_router
from lifelog.presentation.api.v1.endpoints.reflections import router as reflections_router
from lifelog.presentation.api.v1.endpoints.career import router as career_router
from lifelog.presentation.api.v1.endpoints.masters_prep import router as masters_prep_router
from lifelog.presentation.api.v1.endpoints.projects import router as projects_router
from lifelog.presentation.api.v1.endpoints.export import router as export_router

router = APIRouter(prefix="/v1")
router.include_router(health_router)
router.include_router(users_router)
router.include_router(daily_logs_router)
router.include_router(ielts_router)
router.include_router(journals_router)
router.include_router(books_router)
router.include_router(skills_router)
router.include_router(workouts_router)
router.include_router(wellness_router)
router.include_router(financial_router)
router.include_router(reflections_router)
router.include_router(career_router)
router.include_router(masters_prep_router)
router.include_router(projects_router)
router.include_router(export_router)
