from reset_password.libs.result import Error

NOT_FOUND = "NOT_FOUND"
TOKEN_EXPIRED = "TOKEN_EXPIRED"
INVALID_TOKEN = "INVALID_TOKEN"
TOO_MANY_REQUESTS = "TOO_MANY_REQUESTS"
STORAGE_ERROR = "STORAGE_ERROR"


class StorageError(Exception):
    """The underlying store failed; surfaced to the caller, never retried here."""

    def __init__(self, base_error: Error):
        self.base_error = base_error
        super().__init__(base_error.message)
