"""Base exception class for all usage-meter-specific errors."""


class UsageMeterError(Exception):
    """Base class for all usage-meter errors.

    ``code`` is the error code reported to channel callers when the error
    terminates a request.
    """

    def __init__(self, message: str, code: str = "UNAVAILABLE") -> None:
        super().__init__(message)
        self.code = code
