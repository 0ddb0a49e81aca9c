"""Notification headers attached to responses of mutating requests."""

from hospital.core.config import settings


def create_alert(message: str, param: str) -> dict[str, str]:
    return {
        f"X-{settings.APPLICATION_NAME}-alert": message,
        f"X-{settings.APPLICATION_NAME}-params": param,
    }


def create_entity_creation_alert(entity_name: str, param: str) -> dict[str, str]:
    return create_alert(f"A new {entity_name} is created with identifier {param}", param)


def create_entity_update_alert(entity_name: str, param: str) -> dict[str, str]:
    return create_alert(f"A {entity_name} is updated with identifier {param}", param)


def create_entity_deletion_alert(entity_name: str, param: str) -> dict[str, str]:
    return create_alert(f"A {entity_name} is deleted with identifier {param}", param)


def create_failure_alert(entity_name: str, error_key: str) -> dict[str, str]:
    return {
        f"X-{settings.APPLICATION_NAME}-error": f"error.{error_key}",
        f"X-{settings.APPLICATION_NAME}-params": entity_name,
    }
