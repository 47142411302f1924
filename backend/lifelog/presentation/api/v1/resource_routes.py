"""Standard endpoint set for one entity, generated from its descriptor.

Registers, relative to the router prefix:

    GET    ""                       list (page, limit, search, startDate, endDate, filters)
    POST   ""                       create
    GET    "/date/{on}"             get by date          (per-day entities)
    PUT    "/date/{on}"             upsert by date       (per-day entities)
    GET    "/{record_id}"           get by id
    PUT    "/{record_id}"           update
    DELETE "/{record_id}"           delete
    POST   "/{record_id}/{child}"               add child record
    DELETE "/{record_id}/{child}/{child_id}"    delete child record

Bespoke routes such as ``/stats`` must be added to the router before calling
``register_resource_routes`` so they are matched ahead of ``/{record_id}``.
"""

import datetime as dt
from collections.abc import Callable
from typing import Any

from fastapi import APIRouter, Depends, Request, status
from pydantic import BaseModel

from lifelog.application.schemas import ApiResponse
from lifelog.application.services import ResourceService
from lifelog.domain.entities import EntityDescriptor
from lifelog.infrastructure.dependencies import get_current_user_id, resource_service
from lifelog.presentation.api.responses import paginated, success

PayloadHook = Callable[[dict[str, Any]], dict[str, Any]]


def register_resource_routes(
    router: APIRouter,
    descriptor: EntityDescriptor,
    create_schema: type[BaseModel],
    update_schema: type[BaseModel],
    *,
    upsert_schema: type[BaseModel] | None = None,
    prepare_upsert: PayloadHook | None = None,
    child_schemas: dict[str, type[BaseModel]] | None = None,
) -> None:
    """Attach the resource engine's operations for ``descriptor`` to ``router``."""
    get_service = resource_service(descriptor)
    label = descriptor.label

    @router.get("", response_model=ApiResponse)
    async def list_records(
        request: Request,
        user_id: str = Depends(get_current_user_id),
        service: ResourceService = Depends(get_service),
    ) -> ApiResponse:
        page = await service.list_records(user_id, dict(request.query_params))
        return paginated(page)

    @router.post("", response_model=ApiResponse, status_code=status.HTTP_201_CREATED)
    async def create_record(
        payload: create_schema,  # type: ignore[valid-type]
        user_id: str = Depends(get_current_user_id),
        service: ResourceService = Depends(get_service),
    ) -> ApiResponse:
        record = await service.create_record(user_id, payload.model_dump())
        return success(record, f"{label} created successfully")

    if descriptor.upsert_by_date:
        body_schema = upsert_schema or update_schema

        @router.get("/date/{on}", response_model=ApiResponse)
        async def get_record_by_date(
            on: dt.date,
            user_id: str = Depends(get_current_user_id),
            service: ResourceService = Depends(get_service),
        ) -> ApiResponse:
            return success(await service.get_record_by_date(user_id, on))

        @router.put("/date/{on}", response_model=ApiResponse)
        async def upsert_record_by_date(
            on: dt.date,
            payload: body_schema,  # type: ignore[valid-type]
            user_id: str = Depends(get_current_user_id),
            service: ResourceService = Depends(get_service),
        ) -> ApiResponse:
            data = payload.model_dump(exclude_unset=True)
            if prepare_upsert is not None:
                data = prepare_upsert(data)
            record = await service.upsert_record_by_date(user_id, on, data)
            return success(record, f"{label} saved successfully")

    @router.get("/{record_id}", response_model=ApiResponse)
    async def get_record(
        record_id: str,
        user_id: str = Depends(get_current_user_id),
        service: ResourceService = Depends(get_service),
    ) -> ApiResponse:
        return success(await service.get_record(user_id, record_id))

    @router.put("/{record_id}", response_model=ApiResponse)
    async def update_record(
        record_id: str,
        payload: update_schema,  # type: ignore[valid-type]
        user_id: str = Depends(get_current_user_id),
        service: ResourceService = Depends(get_service),
    ) -> ApiResponse:
        record = await service.update_record(
            user_id, record_id, payload.model_dump(exclude_unset=True)
        )
        return success(record, f"{label} updated successfully")

    @router.delete("/{record_id}", response_model=ApiResponse)
    async def delete_record(
        record_id: str,
        user_id: str = Depends(get_current_user_id),
        service: ResourceService = Depends(get_service),
    ) -> ApiResponse:
        await service.delete_record(user_id, record_id)
        return success(None, f"{label} deleted successfully")

    for child, schema in (child_schemas or {}).items():
        _register_child_routes(router, descriptor, child, schema, get_service)


def _register_child_routes(
    router: APIRouter,
    descriptor: EntityDescriptor,
    child: str,
    schema: type[BaseModel],
    get_service: Callable[..., Any],
) -> None:
    child_label = descriptor.child(child).label

    @router.post(
        f"/{{record_id}}/{child}",
        response_model=ApiResponse,
        status_code=status.HTTP_201_CREATED,
    )
    async def add_child_record(
        record_id: str,
        payload: schema,  # type: ignore[valid-type]
        user_id: str = Depends(get_current_user_id),
        service: ResourceService = Depends(get_service),
    ) -> ApiResponse:
        record = await service.add_child_record(user_id, record_id, child, payload.model_dump())
        return success(record, f"{child_label} added successfully")

    @router.delete(f"/{{record_id}}/{child}/{{child_id}}", response_model=ApiResponse)
    async def delete_child_record(
        record_id: str,
        child_id: str,
        user_id: str = Depends(get_current_user_id),
        service: ResourceService = Depends(get_service),
    ) -> ApiResponse:
        await service.delete_child_record(user_id, record_id, child, child_id)
        return success(None, f"{child_label} deleted successfully")
