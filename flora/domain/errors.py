"""Application error taxonomy.

Absent data (no session, no favorites) is never an error and has no class here.
Each error carries the HTTP status the API layer answers with.
"""


class FloraError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationFailed(FloraError):
    """Malformed login/registration input. Nothing was changed."""
    status_code = 400


class DuplicateUserError(FloraError):
    status_code = 400


class AuthenticationFailed(FloraError):
    status_code = 401


class NotLoggedIn(FloraError):
    status_code = 401


class PendingNotFound(FloraError):
    status_code = 404


class StorageReadError(FloraError):
    """Durable storage could not be read. Repositories degrade this to empty state."""
    status_code = 500


class StorageWriteError(FloraError):
    """A durable write failed; the in-memory change it belonged to was discarded."""
    status_code = 500


class CatalogError(FloraError):
    """Network failure, timeout or non-2xx answer from the plant catalog."""
    status_code = 502
