"""Domain-specific exceptions — framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist or is not owned by the caller."""

    def __init__(self, entity_type: str, value: object, field: str = "id"):
        self.entity_type = entity_type
        self.field = field
        self.value = value
        super().__init__(f"{entity_type} with {field} '{value}' not found")


class DuplicateEntityError(Exception):
    """Raised when attempting to create a duplicate entity."""

    def __init__(self, entity_type: str, field: str | None = None, value: object = None):
        self.entity_type = entity_type
        self.field = field
        self.value = value
        if field is None:
            message = f"A {entity_type} record with this value already exists"
        else:
            message = f"{entity_type} with {field}='{value}' already exists"
        super().__init__(message)


class InvalidRecordError(Exception):
    """Raised when a payload or query parameter cannot be applied to an entity."""


class AuthenticationError(Exception):
    """Raised when the caller identity is missing or cannot be verified."""


class StoreUnavailableError(Exception):
    """Raised when the record store fails or times out for a single request."""
