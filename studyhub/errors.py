"""Failure kinds raised by the repositories.

Lookups that find nothing are not errors: they return ``None`` (or
``False`` for deletes). Input shape violations surface as pydantic's
``ValidationError`` when the input model is built, before any repository
is called.
"""


class StudyHubError(Exception):
    """Base class for business-rule failures."""


class ReferentialIntegrityError(StudyHubError):
    """A foreign key in a create/update payload does not resolve to a row."""

    def __init__(self, entity: str, entity_id: int):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} with id {entity_id} not found")


class UniquenessViolation(StudyHubError):
    """A unique column (or column pair) already holds the given value."""

    def __init__(self, entity: str, field: str, value):
        self.entity = entity
        self.field = field
        self.value = value
        super().__init__(f"{entity} with {field} '{value}' already exists")


class DependencyConflict(StudyHubError):
    """A delete is blocked by rows that still reference the target."""

    def __init__(self, entity: str, dependent: str, count: int):
        self.entity = entity
        self.dependent = dependent
        self.count = count
        super().__init__(
            f"Cannot delete {entity.lower()}: it is referenced by {dependent} ({count})"
        )
