"""Exceptions raised by the quantity rule adapters.

The resolution core never raises; these are reserved for the storage and
REST adapters around it.
"""


class ApplicationError(Exception):
    """Base class for application-specific errors."""

    def __init__(
        self, message: str = "An application error occurred", original_exception: Exception | None = None
    ) -> None:
        super().__init__(message)
        self.original_exception = original_exception
        self.message = message

    def __str__(self) -> str:
        if self.original_exception:
            return f"{self.message} (Original error: {self.original_exception})"
        return self.message


class APIError(ApplicationError):
    """Raised when a WordPress or WooCommerce REST call fails."""

    def __init__(
        self,
        message: str = "API call failed",
        original_exception: Exception | None = None,
        status_code: int | None = None,
        endpoint: str | None = None,
    ) -> None:
        super().__init__(message, original_exception)
        self.status_code = status_code
        self.endpoint = endpoint
        self.message = f"API Error: {message}"
        if endpoint:
            self.message += f" [{endpoint}]"
        if status_code:
            self.message += f" (Status Code: {status_code})"


class DatabaseError(ApplicationError):
    """Raised when a content, options or schema query against MySQL fails."""

    def __init__(
        self,
        message: str = "Database operation failed",
        original_exception: Exception | None = None,
        table: str | None = None,
    ) -> None:
        super().__init__(message, original_exception)
        self.table = table
        self.message = f"Database Error: {message}"
        if table:
            self.message += f" (table: {table})"
