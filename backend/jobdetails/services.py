"""Services used by HTTP resources.

Entity services are thin pass-throughs over the repositories: they log
the call and delegate. `EntityImportService` validates and persists
batches of records for the seeding script.
"""

import logging
from typing import Iterable, List, Optional, Type
from pydantic import BaseModel, ValidationError
from sqlmodel import Session
from . import models, repositories, schemas
from .utils.pagination import Page, Pageable

logger = logging.getLogger("jobdetails.services")


class EntityService:
    """Delegate CRUD calls for one entity to its repository."""
    repository_cls: Type[repositories.EntityRepository]
    entity_label: str
    entity_plural: str

    def __init__(self, session: Session):
        self.session = session
        self.repo = self.repository_cls(session)

    def save(self, entity):
        logger.debug("Request to save %s : %s", self.entity_label, entity)
        return self.repo.save(entity)

    def find_all(self, pageable: Pageable) -> Page:
        logger.debug("Request to get all %s", self.entity_plural)
        return self.repo.find_page(pageable)

    def find_one(self, entity_id: int):
        logger.debug("Request to get %s : %s", self.entity_label, entity_id)
        return self.repo.get(entity_id)

    def delete(self, entity_id: int) -> None:
        logger.debug("Request to delete %s : %s", self.entity_label, entity_id)
        self.repo.delete(entity_id)


class TitleService(EntityService):
    repository_cls = repositories.TitleRepository
    entity_label = "Title"
    entity_plural = "Titles"


class CompanyService(EntityService):
    repository_cls = repositories.CompanyRepository
    entity_label = "Company"
    entity_plural = "Companies"


# entity key -> (service, model, input schema)
ENTITY_TYPES = {
    "titles": (TitleService, models.Title, schemas.TitleIn),
    "companies": (CompanyService, models.Company, schemas.CompanyIn),
}


class EntityImportService:
    """Import entity records from plain dicts and persist them."""
    def __init__(self, session: Session):
        self.session = session

    def import_records(self, entity: str, records: Iterable[dict], dry_run: bool = False):
        """Validate `records` for `entity` and create one row per valid record.

        Returns a dictionary with the number of created rows and the
        validation `errors` encountered per item. Records carrying an `id`
        are rejected, mirroring the create endpoint.
        """
        if entity not in ENTITY_TYPES:
            raise ValueError(f"unknown entity: {entity}")
        service_cls, model, schema = ENTITY_TYPES[entity]
        service = service_cls(self.session)
        created = 0
        errors: List[dict] = []
        for idx, record in enumerate(records):
            parsed, error = self._validate_record(schema, record)
            if error:
                errors.append({'index': idx, 'error': error, 'item': record})
                continue
            if not dry_run:
                service.save(model(**parsed.model_dump()))
            created += 1
        return {'created': created, 'errors': errors}

    def _validate_record(self, schema: Type[BaseModel], record) -> tuple[Optional[BaseModel], Optional[str]]:
        if not isinstance(record, dict):
            return None, 'record must be an object'
        try:
            parsed = schema.model_validate(record)
        except ValidationError as e:
            return None, '; '.join(f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors())
        if getattr(parsed, 'id', None) is not None:
            return None, 'a new record cannot already have an id'
        return parsed, None
