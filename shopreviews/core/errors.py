# shopreviews/core/errors.py
"""
Service error taxonomy.

Every error carries the HTTP status it maps to; main.py registers one
handler for the whole hierarchy so routers can simply raise.
"""
from __future__ import annotations
from typing import Any, Optional


class ServiceError(Exception):
    status_code: int = 500

    def __init__(self, message: str, *, details: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_dict(self) -> dict:
        payload: dict[str, Any] = {"detail": self.message, "error": type(self).__name__}
        if self.details is not None:
            payload["errors"] = self.details
        return payload


class ValidationError(ServiceError):
    """Malformed or out-of-range input. Not retryable."""
    status_code = 400


class NotFoundError(ServiceError):
    """The targeted identifier does not exist. Not retryable."""
    status_code = 404

    def __init__(self, entity: str, identifier: Any):
        super().__init__(f"{entity} {identifier} not found")
        self.entity = entity
        self.identifier = identifier


class AggregationError(ServiceError):
    """The review store failed while an aggregate was being computed."""
    status_code = 500

    def __init__(self, product_id: Any, cause: BaseException):
        super().__init__(f"Failed to aggregate reviews for product {product_id}: {cause}")
        self.product_id = product_id
        self.__cause__ = cause


class SourceError(ServiceError):
    """An external review source could not be read."""
    status_code = 502
