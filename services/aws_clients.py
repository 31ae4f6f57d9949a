"""
Startup construction of the shared AWS client bundle.

Credentials are checked once with STS GetCallerIdentity before any client
is handed to the HTTP layer; a failure here must stop the process.
"""
from dataclasses import dataclass
from typing import Optional

import boto3
from botocore.config import Config as BotoConfig
from botocore.exceptions import BotoCoreError, ClientError

from logger_config import get_logger
from services.protocols import CredentialProvider
from services.s3_service import S3Service
from services.ssm_service import SSMService
from utils.exceptions import CredentialValidationError

logger = get_logger(__name__)


@dataclass(frozen=True)
class AWSClients:
    """Read-only bundle shared by all request handlers."""

    s3: S3Service
    ssm: SSMService
    caller_arn: str


def default_credential_provider(
    region_name: Optional[str] = None
) -> CredentialProvider:
    """
    Build a provider backed by the standard boto3 credential chain.

    Args:
        region_name: Region override; None defers to the chain

    Returns:
        Callable returning a new boto3 session
    """
    def provider() -> boto3.session.Session:
        return boto3.session.Session(region_name=region_name)
    return provider


def build_client_config(request_timeout: float) -> BotoConfig:
    """Client config with bounded network waits and SDK retries disabled."""
    return BotoConfig(
        connect_timeout=request_timeout,
        read_timeout=request_timeout,
        retries={'total_max_attempts': 1},
    )


def build_aws_clients(
    region_name: Optional[str] = None,
    request_timeout: float = 10.0,
    credential_provider: Optional[CredentialProvider] = None
) -> AWSClients:
    """
    Resolve credentials, validate them and build the S3 and SSM clients.

    Args:
        region_name: Region override passed to the default provider
        request_timeout: Connect and read timeout for every AWS call, seconds
        credential_provider: Session factory; defaults to the boto3 chain

    Returns:
        AWSClients bundle ready for concurrent use

    Raises:
        CredentialValidationError: If credentials cannot be resolved or the
            identity check fails
    """
    provider = credential_provider or default_credential_provider(region_name)
    client_config = build_client_config(request_timeout)

    try:
        session = provider()
        sts_client = session.client('sts', config=client_config)
        identity = sts_client.get_caller_identity()
    except (ClientError, BotoCoreError) as e:
        logger.error(f'AWS credential validation failed: {str(e)}')
        raise CredentialValidationError(
            f'AWS credential validation failed: {str(e)}',
            operation='get_caller_identity'
        ) from e

    caller_arn = identity.get('Arn', '')
    logger.info(f'AWS credentials validated for {caller_arn}')

    try:
        s3_client = session.client('s3', config=client_config)
        ssm_client = session.client('ssm', config=client_config)
    except BotoCoreError as e:
        logger.error(f'AWS client construction failed: {str(e)}')
        raise CredentialValidationError(
            f'AWS client construction failed: {str(e)}',
            operation='create_client'
        ) from e

    return AWSClients(
        s3=S3Service(s3_client),
        ssm=SSMService(ssm_client),
        caller_arn=caller_arn,
    )
