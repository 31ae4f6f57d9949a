"""
Process entry point: load config, validate AWS credentials, serve HTTP.
"""
import sys

from app import create_app
from config import get_config
from logger_config import configure_logging, get_logger
from services.aws_clients import build_aws_clients
from utils.exceptions import CredentialValidationError

logger = get_logger(__name__)

HOST = "0.0.0.0"
PORT = 8081


def main() -> None:
    """Start the service, exiting with status 1 on any startup failure."""
    try:
        config = get_config()
    except ValueError as e:
        logger.critical(f'Invalid configuration: {str(e)}')
        sys.exit(1)

    configure_logging(config.log_level)

    try:
        clients = build_aws_clients(
            region_name=config.aws_region,
            request_timeout=config.request_timeout,
        )
    except CredentialValidationError as e:
        logger.critical(f'AWS init failed: {e.message}')
        sys.exit(1)

    app = create_app(config.version, clients.s3, clients.ssm)

    logger.info(f'Service {config.version} listening on {HOST}:{PORT}')
    app.run(host=HOST, port=PORT, threaded=True)


if __name__ == "__main__":
    main()
