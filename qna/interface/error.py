"""Interface layer errors.

Maps domain errors onto HTTP status codes.
"""

from fastapi import HTTPException, status

from qna.domain.error import (
    ConflictError,
    DomainError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)

STATUS_BY_ERROR: dict[type[DomainError], int] = {
    ValidationError: status.HTTP_400_BAD_REQUEST,
    NotAuthorizedError: status.HTTP_403_FORBIDDEN,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    ConflictError: status.HTTP_409_CONFLICT,
}


def status_for(error: DomainError) -> int:
    """HTTP status for a domain error (500 for anything unmapped)."""
    for error_type, code in STATUS_BY_ERROR.items():
        if isinstance(error, error_type):
            return code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def to_http_exception(error: DomainError) -> HTTPException:
    return HTTPException(status_code=status_for(error), detail=str(error))
