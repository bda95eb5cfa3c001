"""Domain errors raised by the store, aggregator and access policy.

Each error maps to exactly one HTTP status; ``app.main`` registers a single
handler that turns any ``StudyError`` into a ``{"detail": ...}`` response.
"""


class StudyError(Exception):
    """Base exception for all study-backend errors."""

    status_code = 500
    default_detail = "Internal error"

    def __init__(self, detail: str | None = None):
        self.detail = detail or self.default_detail
        super().__init__(self.detail)


class NotFoundError(StudyError):
    """Raised when a referenced record does not exist."""

    status_code = 404
    default_detail = "Not found"


class ConflictError(StudyError):
    """Raised when a unique field (email, bookmark target, progress key) collides."""

    status_code = 409
    default_detail = "Conflict"


class UnauthorizedError(StudyError):
    """Raised when the token is missing, invalid or expired."""

    status_code = 401
    default_detail = "Not authenticated"


class ForbiddenError(StudyError):
    """Raised when an authenticated principal is not allowed to act."""

    status_code = 403
    default_detail = "Forbidden"


class InvalidInputError(StudyError):
    """Raised when a payload passes schema validation but is semantically wrong."""

    status_code = 400
    default_detail = "Invalid input"
