"""
Custom exceptions for VibeCast.

This module defines application-specific exceptions with proper error handling
and HTTP status code mapping for API responses. Pipeline failures
(SourceUnavailable, AnalysisFailure, SynthesisFailure) are recovered inside
the trend analyzer and never reach API clients.
"""

from typing import Any, Dict, Optional


class VibeCastException(Exception):
    """Base exception for VibeCast application."""

    def __init__(
        self,
        message: str,
        error_code: str = "GENERAL_ERROR",
        details: Optional[Dict[str, Any]] = None,
        status_code: int = 500
    ):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.status_code = status_code
        super().__init__(self.message)


class ValidationError(VibeCastException):
    """Raised when input validation fails."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            error_code="VALIDATION_ERROR",
            details=details,
            status_code=400
        )


class NotFoundError(VibeCastException):
    """Raised when an upstream resource does not exist."""

    def __init__(self, resource: str, identifier: str):
        super().__init__(
            message=f"{resource} '{identifier}' not found",
            error_code="NOT_FOUND",
            details={"resource": resource, "identifier": identifier},
            status_code=404
        )

class SourceUnavailable(VibeCastException):
    """Raised when the upstream cast feed cannot be fetched."""

    def __init__(self, source: str, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=f"Source '{source}' unavailable: {message}",
            error_code="SOURCE_UNAVAILABLE",
            details=details or {"source": source},
            status_code=503
        )


class AnalysisFailure(VibeCastException):
    """Raised when extraction, classification or scoring fails unexpectedly."""

    def __init__(self, stage: str, message: str):
        super().__init__(
            message=f"Trend analysis stage '{stage}' failed: {message}",
            error_code="ANALYSIS_FAILURE",
            details={"stage": stage},
            status_code=500
        )


class SynthesisFailure(VibeCastException):
    """Raised when challenge templates cannot be built from an analysis."""

    def __init__(self, message: str):
        super().__init__(
            message=f"Challenge synthesis failed: {message}",
            error_code="SYNTHESIS_FAILURE",
            status_code=500
        )
