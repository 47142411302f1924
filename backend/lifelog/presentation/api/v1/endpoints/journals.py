"""Journal entry endpoints."""

from fastapi import APIRouter

from lifelog.application.schemas import JournalEntryCreate, JournalEntryUpdate
from lifelog.application.services.descriptors import JOURNAL_ENTRY
from lifelog.presentation.api.v1.resource_routes import register_resource_routes

router = APIRouter(prefix="/journals", tags=["Journals"])

register_resource_routes(router, JOURNAL_ENTRY, JournalEntryCreate, JournalEntryUpdate)
