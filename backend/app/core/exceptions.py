"""
Domain exceptions.

Services and the pure core raise these; the global handler in ``app.main``
converts them to structured HTTP responses via ``to_http_exception``.
"""
from typing import Any, Optional

from fastapi import HTTPException


class FactoryFlowException(Exception):
    code = "FACTORYFLOW_ERROR"
    status_code = 400

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.details = details


class EntityNotFoundException(FactoryFlowException):
    code = "ENTITY_NOT_FOUND"
    status_code = 404

    def __init__(self, entity: str, entity_id: Any):
        super().__init__(f"{entity} with id '{entity_id}' not found.")
        self.entity = entity
        self.entity_id = entity_id


class ValidationException(FactoryFlowException):
    code = "VALIDATION_ERROR"
    status_code = 400


class BusinessRuleViolationException(FactoryFlowException):
    code = "BUSINESS_RULE_VIOLATION"
    status_code = 422


class InvalidStageTransitionException(BusinessRuleViolationException):
    code = "INVALID_STAGE_TRANSITION"

    def __init__(self, stage_id: str, message: str):
        super().__init__(message, details={"stage_id": stage_id})
        self.stage_id = stage_id


class DuplicateEntityException(FactoryFlowException):
    code = "DUPLICATE_ENTITY"
    status_code = 409

    def __init__(self, entity: str, field: str, value: Any):
        super().__init__(f"{entity} with {field} '{value}' already exists.")
        self.entity = entity
        self.field = field
        self.value = value


def to_http_exception(exc: FactoryFlowException) -> HTTPException:
    detail = {"code": exc.code, "message": exc.message}
    if exc.details is not None:
        detail["details"] = exc.details
    return HTTPException(status_code=exc.status_code, detail=detail)
