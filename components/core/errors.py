"""Domain error types shared by repositories and the recurring job."""


class DomainError(ValueError):
    """Base class for domain-level errors."""


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class ConflictError(DomainError):
    """Storage constraint prevents the operation."""


class RecurrenceError(DomainError):
    """A due category cannot be turned into a transaction."""


def category_not_found(category_id: int) -> str:
    """Return message for missing category by ID."""
    return f"Category {category_id} not found"
