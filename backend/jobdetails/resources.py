"""REST resources for entity CRUD.

Every entity exposes the same five endpoints under `/api/<entities>`:

- POST   /api/<entities>       create (201, 400 if the body carries an id)
- PUT    /api/<entities>       update (200), or create when the body has no id
- GET    /api/<entities>       page of entities with pagination headers
- GET    /api/<entities>/{id}  single entity (200) or 404
- DELETE /api/<entities>/{id}  delete (200 whether or not it existed)

`build_entity_router` produces that router for one entity; resources
stay thin and delegate to the entity service.
"""

import logging
from typing import List, Optional, Type

from fastapi import APIRouter, Depends, HTTPException, Path, Query, Response
from pydantic import BaseModel
from sqlmodel import Session

from . import models, schemas, services
from .schemas import MAX_ID
from .config import settings
from .database import get_session
from .errors import BadRequestAlertError
from .repositories import UnknownSortFieldError
from .utils.headers import entity_creation_alert, entity_deletion_alert, entity_update_alert
from .utils.pagination import build_pageable, generate_pagination_headers

logger = logging.getLogger("jobdetails.api")


def build_entity_router(
    *,
    entity_name: str,
    path: str,
    model: type,
    schema_in: Type[BaseModel],
    schema_out: Type[BaseModel],
    service_cls: Type[services.EntityService],
) -> APIRouter:
    """Build the CRUD router for one entity.

    `entity_name` is the lower-case name used in alert headers, `path` the
    plural collection segment (e.g. `titles`).
    """
    router = APIRouter(prefix=f"/api/{path}", tags=[path])
    resource_url = f"/api/{path}"
    label = service_cls.entity_label

    def _create(payload: BaseModel, service: services.EntityService, response: Response):
        if payload.id is not None:
            raise BadRequestAlertError(entity_name, "idexists", f"A new {entity_name} cannot already have an ID")
        result = service.save(model(**payload.model_dump()))
        response.status_code = 201
        response.headers["Location"] = f"{resource_url}/{result.id}"
        response.headers.update(entity_creation_alert(entity_name, str(result.id)))
        return result

    @router.post("", response_model=schema_out, status_code=201, name=f"create_{entity_name}")
    def create_entity(payload: schema_in, response: Response, db: Session = Depends(get_session)):
        logger.debug("REST request to save %s : %s", label, payload)
        return _create(payload, service_cls(db), response)

    @router.put("", response_model=schema_out, name=f"update_{entity_name}")
    def update_entity(payload: schema_in, response: Response, db: Session = Depends(get_session)):
        logger.debug("REST request to update %s : %s", label, payload)
        service = service_cls(db)
        if payload.id is None:
            return _create(payload, service, response)
        result = service.save(model(**payload.model_dump()))
        response.headers.update(entity_update_alert(entity_name, str(result.id)))
        return result

    @router.get("", response_model=List[schema_out], name=f"list_{path}")
    def list_entities(
        response: Response,
        page: int = Query(0, ge=0, le=MAX_ID // settings.MAX_PAGE_SIZE),
        size: Optional[int] = Query(None, ge=1),
        sort: List[str] = Query(default=[]),
        db: Session = Depends(get_session),
    ):
        logger.debug("REST request to get a page of %s", service_cls.entity_plural)
        pageable = build_pageable(page, size, sort, default_size=settings.DEFAULT_PAGE_SIZE, max_size=settings.MAX_PAGE_SIZE)
        try:
            result = service_cls(db).find_all(pageable)
        except UnknownSortFieldError as e:
            raise BadRequestAlertError(entity_name, "sortinvalid", str(e))
        response.headers.update(generate_pagination_headers(result, resource_url))
        return result.content

    @router.get("/{entity_id}", response_model=schema_out, name=f"get_{entity_name}")
    def get_entity(entity_id: int = Path(..., le=MAX_ID), db: Session = Depends(get_session)):
        logger.debug("REST request to get %s : %s", label, entity_id)
        entity = service_cls(db).find_one(entity_id)
        if entity is None:
            raise HTTPException(status_code=404, detail=f"{entity_name} not found")
        return entity

    @router.delete("/{entity_id}", name=f"delete_{entity_name}")
    def delete_entity(entity_id: int = Path(..., le=MAX_ID), db: Session = Depends(get_session)):
        logger.debug("REST request to delete %s : %s", label, entity_id)
        service_cls(db).delete(entity_id)
        return Response(status_code=200, headers=entity_deletion_alert(entity_name, str(entity_id)))

    return router


title_router = build_entity_router(
    entity_name="title",
    path="titles",
    model=models.Title,
    schema_in=schemas.TitleIn,
    schema_out=schemas.TitleOut,
    service_cls=services.TitleService,
)

company_router = build_entity_router(
    entity_name="company",
    path="companies",
    model=models.Company,
    schema_in=schemas.CompanyIn,
    schema_out=schemas.CompanyOut,
    service_cls=services.CompanyService,
)
