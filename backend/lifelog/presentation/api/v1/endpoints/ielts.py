"""IELTS practice endpoints — sessions (with mistakes) and vocabulary."""

from fastapi import APIRouter

from lifelog.application.schemas import (
    IeltsMistakeCreate,
    IeltsSessionCreate,
    IeltsSessionUpdate,
    IeltsVocabCreate,
    IeltsVocabUpdate,
)
from lifelog.application.services.descriptors import IELTS_SESSION, IELTS_VOCAB
from lifelog.presentation.api.v1.resource_routes import register_resource_routes

sessions_router = APIRouter(prefix="/ielts/sessions", tags=["IELTS"])
vocab_router = APIRouter(prefix="/ielts/vocab", tags=["IELTS"])

register_resource_routes(
    sessions_router,
    IELTS_SESSION,
    IeltsSessionCreate,
    IeltsSessionUpdate,
    child_schemas={"mistakes": IeltsMistakeCreate},
)
register_resource_routes(vocab_router, IELTS_VOCAB, IeltsVocabCreate, IeltsVocabUpdate)

router = APIRouter()
router.include_router(sessions_router)
router.include_router(vocab_router)
