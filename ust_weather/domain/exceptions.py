"""
Domain Exceptions - falhas de aquisição, transformação e cache
Clean Architecture: Domain layer exceptions
"""
from typing import Optional

from ust_weather.domain.constants import Messages


class DomainException(Exception):
    """Base exception for all domain-level errors"""
    def __init__(self, message: str, details: dict = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class FetchException(DomainException):
    """Base for failures of a single network acquisition (retryable)"""
    pass


class FetchTimeoutException(FetchException):
    """Raised when a single attempt exceeds its deadline"""
    pass


class NetworkException(FetchException):
    """Raised on transport failure or non-2xx HTTP status"""
    def __init__(self, message: str = "Network error", details: dict = None, status_code: Optional[int] = None):
        super().__init__(message, details)
        self.status_code = status_code
        if status_code is not None:
            self.details.setdefault("status_code", status_code)


class TransformException(DomainException):
    """Raised when the provider payload is malformed or incomplete (not retried)"""
    pass


class CacheReadException(DomainException):
    """Raised when a persisted value is corrupt; always handled as a cache miss"""
    pass


class ExhaustedFallbackException(DomainException):
    """Raised when no fresh data could be obtained and no fallback snapshot exists"""
    def __init__(self, message: str = Messages.FETCH_FAILED, details: dict = None):
        super().__init__(message, details)
