"""
Exceptions raised by the nearby places pipeline.

Transport and parse failures come from the leaves (remote client, detail
parser). The orchestrator wraps them in a stage error so callers can tell
whether the nearby search or the detail fetch failed.
"""

from typing import Optional, Dict, Any
from enum import Enum


class ErrorCode(str, Enum):
    """Error codes surfaced to API callers."""

    TRANSPORT_FAILED = "TRANSPORT_FAILED"
    PARSE_FAILED = "PARSE_FAILED"
    NEARBY_SEARCH_FAILED = "NEARBY_SEARCH_FAILED"
    DETAIL_FETCH_FAILED = "DETAIL_FETCH_FAILED"


class PlacesError(Exception):
    """Base exception for the places service."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}


class PlacesTransportError(PlacesError):
    """Raised when a call to the remote places backend fails."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            error_code=ErrorCode.TRANSPORT_FAILED,
            details=details
        )


class PlacesParseError(PlacesError):
    """Raised when a backend payload is malformed or misses required fields."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            error_code=ErrorCode.PARSE_FAILED,
            details=details
        )


class PlacesStageError(PlacesError):
    """Wraps a failure with the pipeline stage it happened in."""

    stage: str = ""

    def __init__(self, cause: Exception, error_code: ErrorCode):
        super().__init__(
            message=f"{self.stage} failed: {cause}",
            error_code=error_code,
            details={"stage": self.stage, "cause": type(cause).__name__}
        )
        self.cause = cause


class NearbySearchError(PlacesStageError):
    """The nearby search stage failed."""

    stage = "nearby-search"

    def __init__(self, cause: Exception):
        super().__init__(cause, ErrorCode.NEARBY_SEARCH_FAILED)


class DetailFetchError(PlacesStageError):
    """The detail enrichment stage failed."""

    stage = "detail-fetch"

    def __init__(self, cause: Exception):
        super().__init__(cause, ErrorCode.DETAIL_FETCH_FAILED)
