"""Reflection endpoints — one entry per user per day."""

from fastapi import APIRouter

from lifelog.application.schemas import ReflectionEntryCreate, ReflectionEntryUpdate
from lifelog.application.services.descriptors import REFLECTION_ENTRY
from lifelog.presentation.api.v1.resource_routes import register_resource_routes

router = APIRouter(prefix="/reflections", tags=["Reflections"])

register_resource_routes(router, REFLECTION_ENTRY, ReflectionEntryCreate, ReflectionEntryUpdate)
