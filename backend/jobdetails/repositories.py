"""Repository classes encapsulating database operations.

`EntityRepository` implements the store reads/writes shared by every
entity; the concrete repositories only bind the model class. Repositories
return SQLModel objects and perform commits/refreshes where appropriate.
"""

from typing import Generic, List, Optional, Type, TypeVar
from sqlmodel import SQLModel, Session, select
from sqlalchemy import func
from . import models
from .utils.pagination import Page, Pageable

ModelT = TypeVar("ModelT", bound=SQLModel)


class UnknownSortFieldError(ValueError):
    """Raised when a page request sorts on a column the entity lacks."""

    def __init__(self, field: str):
        super().__init__(f"unknown sort field: {field}")
        self.field = field


class EntityRepository(Generic[ModelT]):
    """CRUD operations for a single SQLModel table."""
    model: Type[ModelT]

    def __init__(self, session: Session):
        self.session = session

    def find_all(self) -> List[ModelT]:
        """Return every row ordered by id."""
        stmt = select(self.model).order_by(self.model.id)
        return self.session.exec(stmt).all()

    def find_page(self, pageable: Pageable) -> Page[ModelT]:
        """Return one page of rows ordered by the requested sort keys.

        Without sort keys rows come back in id order. Raises
        `UnknownSortFieldError` for a sort key that is not a column.
        """
        columns = self.model.__table__.columns
        stmt = select(self.model)
        for order in pageable.sort:
            if order.field not in columns:
                raise UnknownSortFieldError(order.field)
            col = columns[order.field]
            stmt = stmt.order_by(col.desc() if order.descending else col.asc())
        if not pageable.sort:
            stmt = stmt.order_by(self.model.id)
        stmt = stmt.offset(pageable.offset).limit(pageable.size)
        content = self.session.exec(stmt).all()
        return Page(content=list(content), total=self.count(), page=pageable.page, size=pageable.size, sort=pageable.sort)

    def count(self) -> int:
        stmt = select(func.count()).select_from(self.model)
        return self.session.exec(stmt).one()

    def get(self, entity_id: int) -> Optional[ModelT]:
        """Fetch a row by primary key or `None`."""
        return self.session.get(self.model, entity_id)

    def save(self, entity: ModelT) -> ModelT:
        """Insert a new row or overwrite the row with the same id.

        Entities carrying a stored id are merged so a detached instance
        built from a request body replaces the stored state. An id with no
        stored row is dropped and the database assigns a fresh one.
        """
        if entity.id is not None and self.get(entity.id) is None:
            entity.id = None
        if entity.id is not None:
            entity = self.session.merge(entity)
        else:
            self.session.add(entity)
        self.session.commit()
        self.session.refresh(entity)
        return entity

    def delete(self, entity_id: int) -> bool:
        """Delete the row with `entity_id`; return False if there was none."""
        entity = self.get(entity_id)
        if entity is None:
            return False
        self.session.delete(entity)
        self.session.commit()
        return True


class TitleRepository(EntityRepository[models.Title]):
    """Store access for `Title` rows."""
    model = models.Title


class CompanyRepository(EntityRepository[models.Company]):
    """Store access for `Company` rows."""
    model = models.Company
