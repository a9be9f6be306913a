"""Domain-specific exceptions — framework-independent."""

from dataclasses import dataclass


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


@dataclass(frozen=True)
class FieldError:
    """A single constraint violation on a submitted field."""

    field: str
    message: str


class ValidationFailedError(Exception):
    """Raised when submitted data violates the entity constraints.

    Nothing is persisted when this is raised.
    """

    def __init__(self, errors: list[FieldError]):
        self.errors = errors
        fields = ", ".join(e.field for e in errors) or "input"
        super().__init__(f"Invalid {fields}")


class ForbiddenError(Exception):
    """Raised when an anti-forgery token does not match the resource."""

    def __init__(self, action: str, entity_id: int | str):
        self.action = action
        self.entity_id = entity_id
        super().__init__(f"Invalid token for {action} on '{entity_id}'")


class StoreUnavailableError(Exception):
    """Raised when the article store cannot be reached in time."""

    def __init__(self, operation: str, cause: BaseException | None = None):
        self.operation = operation
        self.cause = cause
        detail = f": {type(cause).__name__}" if cause is not None else ""
        super().__init__(f"Article store unavailable during '{operation}'{detail}")
