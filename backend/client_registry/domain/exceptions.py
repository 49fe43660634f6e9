"""Domain-specific exceptions: framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class DuplicateEntityError(Exception):
    """Raised when attempting to create a duplicate entity."""

    def __init__(self, entity_type: str, field: str, value: str):
        self.entity_type = entity_type
        self.field = field
        self.value = value
        super().__init__(f"{entity_type} with {field}='{value}' already exists")


class RecordValidationError(Exception):
    """Raised when a client payload fails the record schema.

    ``issues`` maps each offending field (JSON name) to its first
    human-readable error message.
    """

    def __init__(self, issues: dict[str, str]):
        self.issues = issues
        fields = ", ".join(sorted(issues)) or "payload"
        super().__init__(f"Invalid fields: {fields}")
