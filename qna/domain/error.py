"""Domain layer errors."""

from pydantic import ValidationError as PydanticValidationError


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error (malformed or missing input)."""

    @classmethod
    def from_pydantic(cls, exc: PydanticValidationError) -> "ValidationError":
        """Build from a model validation failure, keeping the first message."""
        errors = exc.errors()
        if not errors:
            return cls(str(exc))
        message = errors[0]["msg"].removeprefix("Value error, ")
        return cls(message)


class NotAuthorizedError(DomainError):
    """Raised when a user acts on content they don't own."""

    def __init__(self, resource: str, resource_id: str, user_id: str, action: str = "edit"):
        self.resource = resource
        self.resource_id = resource_id
        super().__init__(
            f"User {user_id} is not authorized to {action} {resource} {resource_id}"
        )


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class ConflictError(DomainError):
    """Raised when a write collides with existing state (e.g. duplicate email)."""

    pass
