"""
SSM Parameter Store service for parameter listing and lookup.
"""
from typing import Any, List, Optional, TYPE_CHECKING
from botocore.exceptions import BotoCoreError, ClientError
from logger_config import get_logger
from utils.exceptions import ParameterStoreError

if TYPE_CHECKING:
    from mypy_boto3_ssm import SSMClient
else:
    SSMClient = Any

logger = get_logger(__name__)


def _error_code(error: Exception) -> Optional[str]:
    if isinstance(error, ClientError):
        return error.response.get('Error', {}).get('Code')
    return None


class SSMService:
    """Service for Parameter Store operations."""

    def __init__(self, client: SSMClient) -> None:
        """
        Initialize SSM service.

        Args:
            client: SSM client built by build_aws_clients
        """
        self.client: SSMClient = client

    def list_parameter_names(self) -> List[str]:
        """
        List parameter names from a single describe_parameters call.

        Returns:
            Parameter names in the order returned by SSM

        Raises:
            ParameterStoreError: If the SSM call fails
        """
        try:
            response = self.client.describe_parameters()
        except (ClientError, BotoCoreError) as e:
            logger.error(f'SSM describe_parameters failed: {str(e)}')
            raise ParameterStoreError(
                f'Failed to describe parameters: {str(e)}',
                operation='describe_parameters',
                error_code=_error_code(e)
            ) from e

        names = [param['Name'] for param in response.get('Parameters', [])]
        logger.debug(f'Described {len(names)} SSM parameters')
        return names

    def get_parameter_value(self, name: str) -> str:
        """
        Get the value of a single parameter.

        SecureString values are returned as stored (no decryption).

        Args:
            name: Parameter name, passed through unmodified

        Returns:
            The parameter value

        Raises:
            ParameterStoreError: If the parameter does not exist or the call fails
        """
        try:
            response = self.client.get_parameter(Name=name)
        except (ClientError, BotoCoreError) as e:
            code = _error_code(e)
            if code == 'ParameterNotFound':
                logger.info(f'SSM parameter {name} not found')
            else:
                logger.error(f'SSM get_parameter failed for {name}: {str(e)}')
            raise ParameterStoreError(
                f'Failed to get parameter {name}: {str(e)}',
                parameter_name=name,
                operation='get_parameter',
                error_code=code
            ) from e

        try:
            return response['Parameter']['Value']
        except KeyError as e:
            logger.error(f'SSM get_parameter response for {name} has no value')
            raise ParameterStoreError(
                f'Malformed get_parameter response for {name}',
                parameter_name=name,
                operation='get_parameter'
            ) from e
