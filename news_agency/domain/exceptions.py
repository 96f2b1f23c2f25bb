"""Domain-specific exceptions — framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class ArticleValidationError(Exception):
    """Raised when an article violates one or more of its invariants.

    ``errors`` holds every violated rule, in the order they are checked.
    """

    def __init__(self, errors: list[str]):
        self.errors = list(errors)
        super().__init__(" ".join(self.errors))


class InvalidStatusError(ArticleValidationError, ValueError):
    """Raised when a value outside the fixed status set is assigned."""

    def __init__(self, value: object):
        self.value = value
        super().__init__([f"Invalid status: {value!r}."])


class PersistenceError(Exception):
    """Raised when the database cannot complete an operation.

    The driver or SQLAlchemy exception is chained as ``__cause__`` and also
    kept on ``cause`` for callers that log it.
    """

    def __init__(self, message: str, cause: BaseException | None = None):
        self.message = message
        self.cause = cause
        super().__init__(f"{message}: {cause}" if cause else message)
