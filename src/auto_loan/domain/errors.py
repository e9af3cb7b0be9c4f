"""Errors raised while pricing a loan or looking up a vehicle.

Nothing here knows about HTTP. Each error carries a stable ``error_code``
that the entrypoint maps to a status, and ``to_dict()`` gives the payload.

Field-level problems travel as ``FieldError`` dicts::

    {"field": "term_months", "message": "...", "code": "INVALID_TERM"}
"""

from typing import Any

FieldError = dict[str, str]


def field_error(field: str, message: str, code: str) -> FieldError:
    return {"field": field, "message": message, "code": code}


class DomainError(Exception):
    """Base for every error the loan core and the vehicle catalog raise.

    ``context`` holds extra key/values (catalog path, vehicle id) that are
    merged into ``to_dict()``.
    """

    error_code: str = "DOMAIN_ERROR"

    def __init__(self, message: str, **context: Any) -> None:
        self.message = message
        self.context = context
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {"message": self.message, "code": self.error_code, **self.context}


class ValidationError(DomainError):
    """Loan inputs that cannot be priced.

    Raised for a term that is not a positive whole number of months, and by
    the HTTP mappers for money or percent strings that are not decimals.
    Carries the offending fields in ``errors`` when there are any.

    REST: 422 Unprocessable Entity
    """

    error_code: str = "VALIDATION_ERROR"

    def __init__(
        self,
        message: str | None = None,
        errors: list[FieldError] | None = None,
        **context: Any,
    ) -> None:
        self.errors: list[FieldError] | None = errors or None
        if message is None:
            message = "Validation failed" if self.errors else "Validation error"
        super().__init__(message, **context)

    def to_dict(self) -> dict[str, Any]:
        payload = super().to_dict()
        if self.errors:
            payload["errors"] = self.errors
        return payload


class NotFoundError(DomainError):
    """A vehicle id the catalog does not know.

    REST: 404 Not Found
    """

    error_code: str = "NOT_FOUND"

    def __init__(self, resource: str, identifier: str | None = None, **context: Any) -> None:
        if identifier:
            message = f"{resource} with identifier '{identifier}' not found"
        else:
            message = f"{resource} not found"

        super().__init__(message, resource=resource, identifier=identifier, **context)


class InternalError(DomainError):
    """The service itself is broken, e.g. the vehicle catalog file is unreadable.

    Logged with its context; the client only sees the message.

    REST: 500 Internal Server Error
    """

    error_code: str = "INTERNAL_ERROR"
