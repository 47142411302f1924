"""Skill session endpoints."""

from fastapi import APIRouter

from lifelog.application.schemas import SkillSessionCreate, SkillSessionUpdate
from lifelog.application.services.descriptors import SKILL_SESSION
from lifelog.presentation.api.v1.resource_routes import register_resource_routes

router = APIRouter(prefix="/skills", tags=["Skills"])

register_resource_routes(router, SKILL_SESSION, SkillSessionCreate, SkillSessionUpdate)
