"""FastAPI application entrypoint.

This module wires the entity resources, HTML views and exception
handlers into one app. Resources are intentionally thin: they accept
requests, delegate to services, and return JSON responses.

Endpoints implemented (per entity, `titles` and `companies`):
- POST /api/<entities>
- PUT /api/<entities>
- GET /api/<entities>
- GET /api/<entities>/{id}
- DELETE /api/<entities>/{id}
- GET /<entities>, GET /<entities>/{id} (HTML)
- GET /health
"""

from fastapi import FastAPI, Request
from fastapi.responses import Response
from fastapi.middleware.cors import CORSMiddleware
import json
import logging
import time
import uuid
from .database import create_db_and_tables
from .errors import internal_error_handler, register_exception_handlers
from .resources import company_router, title_router
from .views import router as views_router
from .config import settings

app = FastAPI(title="Job Details API")
logger = logging.getLogger("jobdetails.api")
if not logger.handlers:
    logging.basicConfig(level=settings.LOG_LEVEL)

# Wide-open CORS lets a separately served frontend call the API in dev.
if settings.ALLOW_DEV_CORS:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Total-Count", "Link", "Location", "X-Request-ID"],
    )

register_exception_handlers(app)
app.include_router(title_router)
app.include_router(company_router)
app.include_router(views_router)

create_db_and_tables()


@app.middleware("http")
async def request_context_middleware(request: Request, call_next):
    req_id = request.headers.get("X-Request-ID", uuid.uuid4().hex)
    request.state.request_id = req_id
    started = time.perf_counter()
    response: Response
    try:
        response = await call_next(request)
    except Exception as exc:
        elapsed_ms = round((time.perf_counter() - started) * 1000.0, 2)
        if request.url.path.startswith("/api"):
            logger.error(
                "request_failed %s",
                json.dumps(
                    {
                        "request_id": req_id,
                        "path": request.url.path,
                        "method": request.method,
                        "duration_ms": elapsed_ms,
                        "client": request.client.host if request.client else "unknown",
                    },
                    ensure_ascii=True,
                ),
            )
        response = await internal_error_handler(request, exc)
        response.headers["X-Request-ID"] = req_id
        return response
    response.headers["X-Request-ID"] = req_id
    elapsed_ms = round((time.perf_counter() - started) * 1000.0, 2)
    if request.url.path.startswith("/api"):
        logger.info(
            "request_done %s",
            json.dumps(
                {
                    "request_id": req_id,
                    "path": request.url.path,
                    "method": request.method,
                    "status_code": response.status_code,
                    "duration_ms": elapsed_ms,
                    "client": request.client.host if request.client else "unknown",
                },
                ensure_ascii=True,
            ),
        )
    return response


@app.get("/health")
def health():
    """Lightweight health check for uptime monitoring."""
    return {"status": "ok"}


def run():
    """Serve the app with uvicorn on the configured host and port."""
    import uvicorn
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())


if __name__ == "__main__":
    run()
