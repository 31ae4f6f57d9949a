"""
S3 service for bucket listing.
"""
from typing import Any, List, TYPE_CHECKING
from botocore.exceptions import BotoCoreError, ClientError
from logger_config import get_logger
from utils.exceptions import S3OperationError

if TYPE_CHECKING:
    from mypy_boto3_s3 import S3Client
else:
    S3Client = Any

logger = get_logger(__name__)


class S3Service:
    """Service for S3 operations."""

    def __init__(self, client: S3Client) -> None:
        """
        Initialize S3 service.

        Args:
            client: S3 client built by build_aws_clients
        """
        self.client: S3Client = client

    def list_bucket_names(self) -> List[str]:
        """
        List the names of all buckets owned by the caller.

        Only the first response is read; continuation tokens are ignored.

        Returns:
            Bucket names in the order returned by S3

        Raises:
            S3OperationError: If the S3 call fails
        """
        try:
            response = self.client.list_buckets()
        except (ClientError, BotoCoreError) as e:
            logger.error(f'S3 list_buckets failed: {str(e)}')
            raise S3OperationError(
                f'Failed to list buckets: {str(e)}',
                operation='list_buckets'
            ) from e

        names = [bucket['Name'] for bucket in response.get('Buckets', [])]
        logger.debug(f'Listed {len(names)} S3 buckets')
        return names
