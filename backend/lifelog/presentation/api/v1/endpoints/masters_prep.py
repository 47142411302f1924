"""Master's preparation endpoints — items with their work sessions."""

from fastapi import APIRouter

from lifelog.application.schemas import (
    MastersPrepItemCreate,
    MastersPrepItemUpdate,
    MastersPrepSessionCreate,
)
from lifelog.application.services.descriptors import MASTERS_PREP_ITEM
from lifelog.presentation.api.v1.resource_routes import register_resource_routes

router = APIRouter(prefix="/masters-prep/items", tags=["Masters Prep"])

register_resource_routes(
    router,
    MASTERS_PREP_ITEM,
    MastersPrepItemCreate,
    MastersPrepItemUpdate,
    child_schemas={"sessions": MastersPrepSessionCreate},
)
