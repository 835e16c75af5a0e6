"""Custom exception classes"""
from typing import Any, Optional


class AppException(Exception):
    """Base exception for split engine errors"""

    def __init__(
        self,
        message: str,
        error_type: str = "AppError",
        details: Optional[Any] = None
    ):
        self.message = message
        self.error_type = error_type
        self.details = details
        super().__init__(self.message)


class ValidationError(AppException):
    """Malformed input exception"""

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(
            message=message,
            error_type="ValidationError",
            details=details
        )


class ZeroWeightSumError(AppException):
    """Weights cannot be normalized because they sum to zero"""

    def __init__(
        self,
        message: str = "Cannot normalize weights: sum is zero",
        details: Optional[Any] = None
    ):
        super().__init__(
            message=message,
            error_type="ZeroWeightSum",
            details=details
        )
