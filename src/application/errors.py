from __future__ import annotations

from typing import Any, Mapping


class AppError(Exception):
    code = "app_error"
    status_code = 400

    def __init__(self, message: str, *, details: Mapping[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details


class InvalidArgument(AppError):
    code = "invalid_argument"
    status_code = 400

    def __init__(self, entity: str, message: str | None = None) -> None:
        super().__init__(message or f"Invalid '{entity}' object", details={"entity": entity})
        self.entity = entity


class ResourceNotFound(AppError):
    code = "not_found"
    status_code = 404

    def __init__(self, entity: str, identifier: object) -> None:
        super().__init__(
            f"{entity} {identifier} not found",
            details={"entity": entity, "id": str(identifier)},
        )
        self.entity = entity
        self.identifier = identifier


class ResourceExists(AppError):
    code = "already_exists"
    status_code = 400

    def __init__(self, entity: str) -> None:
        super().__init__(f"{entity} already exists", details={"entity": entity})
        self.entity = entity


class MissingArgument(AppError):
    code = "bad_request"
    status_code = 400

    def __init__(self, names: list[str]) -> None:
        super().__init__(
            f"Missing required parameter(s): {', '.join(names)}",
            details={"missing": names},
        )
        self.names = names


class InfrastructureError(AppError):
    code = "infrastructure_error"
    status_code = 500


def require(**params: object) -> None:
    """Raise MissingArgument naming every parameter that is None."""
    missing = [name for name, value in params.items() if value is None]
    if missing:
        raise MissingArgument(missing)
