"""
Custom exception classes for the service layer and startup checks.
"""
from typing import Optional


class CredentialValidationError(Exception):
    """Exception raised when the startup identity check fails."""

    def __init__(
        self,
        message: str,
        operation: Optional[str] = None
    ):
        """
        Initialize credential validation error.

        Args:
            message: Error message
            operation: Operation name if available
        """
        super().__init__(message)
        self.message = message
        self.operation = operation


class S3OperationError(Exception):
    """Exception raised for S3 operation errors."""

    def __init__(
        self,
        message: str,
        operation: Optional[str] = None
    ):
        """
        Initialize S3 operation error.

        Args:
            message: Error message
            operation: Operation name if available
        """
        super().__init__(message)
        self.message = message
        self.operation = operation


class ParameterStoreError(Exception):
    """Exception raised for SSM Parameter Store errors."""

    def __init__(
        self,
        message: str,
        parameter_name: Optional[str] = None,
        operation: Optional[str] = None,
        error_code: Optional[str] = None
    ):
        """
        Initialize Parameter Store error.

        Args:
            message: Error message
            parameter_name: Parameter name if available
            operation: Operation name if available
            error_code: AWS error code (e.g. ParameterNotFound) if available
        """
        super().__init__(message)
        self.message = message
        self.parameter_name = parameter_name
        self.operation = operation
        self.error_code = error_code
