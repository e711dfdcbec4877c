from structlog.stdlib import BoundLogger


class BaseAppError(Exception):
    """Base exception class for application errors."""

    def __init__(self, detail: str = "Internal Server Error") -> None:
        super().__init__(detail)
        self.detail = detail

    def __str__(self) -> str:
        return self.detail


def log_absorbed(logger: BoundLogger, error: Exception, **context: object) -> None:
    """
    Record an error that was handled by falling back to default content.

    Args:
        logger: Logger of the module that absorbed the error.
        error: The absorbed exception.
        **context: Extra event fields (day, destination, ...).
    """
    if isinstance(error, BaseAppError):
        logger.warning(error.detail, error_type=type(error).__name__, **context)
    else:
        logger.exception(
            "Unexpected error absorbed",
            error_type=type(error).__name__,
            **context,
        )
