"""Authentication helpers for routes."""

from fastapi import HTTPException, status

from qna.domain.service import JWTService


def require_user_id(
    jwt_service: JWTService, auth_token: str | None, detail: str = "Unauthorized"
) -> str:
    """Resolve the caller's user ID from the auth cookie.

    Raises:
        HTTPException: 401 if the token is missing, invalid or expired
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)
    if not user_id:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=detail)
    return user_id
