"""
FitFlow - Custom Exception Classes.

Exception hierarchy for application error handling.
"""

from typing import Optional


class FitFlowException(Exception):
    """
    Base exception class for FitFlow.

    All custom exceptions should inherit from this class.

    Attributes:
        message: Human-readable error message.
        status_code: HTTP status code for the error.
        detail: Additional error details.
    """

    def __init__(
        self,
        message: str = "An error occurred",
        status_code: int = 500,
        detail: Optional[str] = None
    ):
        """
        Initialize FitFlowException.

        Args:
            message: Human-readable error message.
            status_code: HTTP status code (default 500).
            detail: Additional error details.
        """
        self.message = message
        self.status_code = status_code
        self.detail = detail or message
        super().__init__(self.message)


class ValidationError(FitFlowException):
    """
    Exception raised for input validation failures.

    Used when:
    - Non-positive weight, height or age
    - Body fat percentage outside [0, 100)
    """

    def __init__(
        self,
        message: str = "Validation error",
        detail: Optional[str] = None
    ):
        super().__init__(
            message=message,
            status_code=400,
            detail=detail
        )


class NotFoundError(FitFlowException):
    """
    Exception raised when a resource is not found.

    Used when:
    - Saved plan index does not exist
    """

    def __init__(
        self,
        message: str = "Resource not found",
        detail: Optional[str] = None
    ):
        super().__init__(
            message=message,
            status_code=404,
            detail=detail
        )


class NoMatchingMealsError(FitFlowException):
    """Raised when diet and avoid filters leave no candidate meals."""

    def __init__(
        self,
        message: str = "No meals match constraints",
        detail: Optional[str] = None
    ):
        super().__init__(
            message=message,
            status_code=422,
            detail=detail
        )


class StoreUnavailableError(FitFlowException):
    """Raised when the saved-plan store cannot be reached."""

    def __init__(
        self,
        message: str = "Plan store unavailable",
        detail: Optional[str] = None
    ):
        super().__init__(
            message=message,
            status_code=503,
            detail=detail
        )
