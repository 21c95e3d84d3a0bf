"""Domain errors raised by services and stores."""


class ProjectMatchError(Exception):
    """Base class for errors surfaced to callers of the core."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(ProjectMatchError):
    """Referenced user, project, or relationship does not exist."""

    status_code = 404


class BadRequestError(ProjectMatchError):
    """Malformed input: illegal status code, filter value, or missing field."""

    status_code = 400


class ConflictError(ProjectMatchError):
    """Reserved for a stricter duplicate-relationship policy. Not raised today."""

    status_code = 409


class StoreError(ProjectMatchError):
    """Opaque persistence failure, propagated without retry."""

    status_code = 500
