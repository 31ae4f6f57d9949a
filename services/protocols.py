"""
Capability interfaces consumed by the HTTP layer.

Handlers depend on these protocols rather than on boto3 so tests can hand
in fakes. S3Service and SSMService satisfy them structurally.
"""
from typing import Callable, List, Protocol

import boto3

__all__ = [
    "BucketLister",
    "ParameterLister",
    "ParameterReader",
    "ParameterStore",
    "CredentialProvider",
]


class BucketLister(Protocol):
    """Lists object storage buckets."""

    def list_bucket_names(self) -> List[str]:
        """
        Return bucket names in the order the API returned them.

        Raises:
            S3OperationError: If the remote call fails
        """
        ...


class ParameterLister(Protocol):
    """Lists Parameter Store parameters."""

    def list_parameter_names(self) -> List[str]:
        """
        Return parameter names from the first describe page.

        Raises:
            ParameterStoreError: If the remote call fails
        """
        ...


class ParameterReader(Protocol):
    """Reads a single Parameter Store value."""

    def get_parameter_value(self, name: str) -> str:
        """
        Return the value stored under ``name``.

        Raises:
            ParameterStoreError: If the parameter is missing or the call fails
        """
        ...


class ParameterStore(ParameterLister, ParameterReader, Protocol):
    """Both Parameter Store capabilities, as served by SSMService."""


# Returns the session all clients are built from
CredentialProvider = Callable[[], boto3.session.Session]
