from typing import Optional


class UploaderError(Exception):
    """Base class for all errors raised by the uploader"""


class ConfigurationError(UploaderError):
    """A required option is missing or invalid"""


class StationError(UploaderError):
    """A station source returned a response that cannot be used"""

    def __init__(self, host: str, message: str) -> None:
        self.host: str = host
        super().__init__(f"{host}: {message}")


class CollectionError(UploaderError):
    """Collecting or normalizing the readings of a cycle failed"""

    def __init__(self, message: str, cause: Optional[BaseException] = None) -> None:
        self.cause: Optional[BaseException] = cause
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)


class PushError(UploaderError):
    """The ingestion endpoint answered with a status other than 200"""

    def __init__(self, status_code: int, reason: str, body: str) -> None:
        self.status_code: int = status_code
        self.reason: str = reason
        self.body: str = body
        super().__init__(f"Push failed with HTTP {status_code} {reason}: {body}")
