"""Server-rendered list and detail pages for entities.

The detail page reads the id from the URL, loads the entity through its
service and renders its fields; the Back button returns to the previous
page in the browser history.
"""

from html import escape
from typing import Iterable

from fastapi import APIRouter, Depends, Path
from fastapi.responses import HTMLResponse
from sqlmodel import Session

from .config import settings
from .schemas import MAX_ID
from .database import get_session
from .services import ENTITY_TYPES
from .utils.pagination import Pageable

router = APIRouter(tags=["views"])

_PAGE = """<!DOCTYPE html>
<html>
<head>
  <meta charset="UTF-8" />
  <title>{title}</title>
  <style>
    body {{ font-family: Arial, sans-serif; margin: 32px; }}
    a {{ color: #0a6; }}
    .card {{ max-width: 640px; padding: 16px; border: 1px solid #ddd; border-radius: 8px; }}
    dt {{ font-weight: bold; }}
    td, th {{ padding: 4px 12px; text-align: left; }}
  </style>
</head>
<body>
  <div class="card">
{body}
  </div>
</body>
</html>
"""


def _render(title: str, body: str, status_code: int = 200) -> HTMLResponse:
    return HTMLResponse(_PAGE.format(title=escape(title), body=body), status_code=status_code)


def _field_rows(entity) -> Iterable[str]:
    for key, value in entity.model_dump().items():
        yield f"      <dt>{escape(key)}</dt><dd>{escape('' if value is None else str(value))}</dd>"


def render_detail(label: str, entity) -> HTMLResponse:
    rows = "\n".join(_field_rows(entity))
    body = (
        f"    <h2>{escape(label)} {entity.id}</h2>\n"
        f"    <dl>\n{rows}\n    </dl>\n"
        "    <button type=\"button\" onclick=\"window.history.back()\">Back</button>"
    )
    return _render(f"{label} {entity.id}", body)


def render_not_found(label: str, entity_id: int) -> HTMLResponse:
    body = (
        f"    <h2>{escape(label)} {entity_id} not found</h2>\n"
        "    <button type=\"button\" onclick=\"window.history.back()\">Back</button>"
    )
    return _render("Not found", body, status_code=404)


def render_list(label: str, path: str, entities, total: int) -> HTMLResponse:
    rows = "\n".join(
        f"      <tr><td><a href=\"/{path}/{e.id}\">{e.id}</a></td><td>{escape(e.name)}</td></tr>"
        for e in entities
    )
    body = (
        f"    <h2>{escape(label)} ({total})</h2>\n"
        f"    <table>\n      <tr><th>ID</th><th>Name</th></tr>\n{rows}\n    </table>"
    )
    return _render(label, body)


@router.get("/", response_class=HTMLResponse)
def home():
    """Minimal homepage linking to the entity pages."""
    links = "\n".join(f"      <li><a href=\"/{path}\">{escape(path.capitalize())}</a></li>" for path in ENTITY_TYPES)
    body = (
        "    <h1>Job details</h1>\n"
        "    <ul>\n"
        "      <li><a href=\"/docs\">Swagger UI</a></li>\n"
        f"{links}\n"
        "    </ul>"
    )
    return _render("Job details", body)


def _register(path: str) -> None:
    service_cls = ENTITY_TYPES[path][0]

    @router.get(f"/{path}", response_class=HTMLResponse, name=f"{path}_list_page")
    def list_page(db: Session = Depends(get_session)):
        result = service_cls(db).find_all(Pageable(size=settings.DEFAULT_PAGE_SIZE))
        return render_list(service_cls.entity_plural, path, result.content, result.total)

    @router.get(f"/{path}/{{entity_id}}", response_class=HTMLResponse, name=f"{path}_detail_page")
    def detail_page(entity_id: int = Path(..., le=MAX_ID), db: Session = Depends(get_session)):
        entity = service_cls(db).find_one(entity_id)
        if entity is None:
            return render_not_found(service_cls.entity_label, entity_id)
        return render_detail(service_cls.entity_label, entity)


for _path in ENTITY_TYPES:
    _register(_path)
