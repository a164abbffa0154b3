"""Alert headers attached to entity mutation responses."""

from __future__ import annotations

from ..config import settings


def create_alert(message: str, param: str) -> dict[str, str]:
    return {
        f"X-{settings.APP_NAME}-alert": message,
        f"X-{settings.APP_NAME}-params": param,
    }


def entity_creation_alert(entity_name: str, param: str) -> dict[str, str]:
    return create_alert(f"A new {entity_name} is created with identifier {param}", param)


def entity_update_alert(entity_name: str, param: str) -> dict[str, str]:
    return create_alert(f"A {entity_name} is updated with identifier {param}", param)


def entity_deletion_alert(entity_name: str, param: str) -> dict[str, str]:
    return create_alert(f"A {entity_name} is deleted with identifier {param}", param)


def failure_alert(entity_name: str | None, error_key: str) -> dict[str, str]:
    headers = {f"X-{settings.APP_NAME}-error": f"error.{error_key}"}
    if entity_name:
        headers[f"X-{settings.APP_NAME}-params"] = entity_name
    return headers
