"""
Shared fixtures for the test suite.
"""
import os

import pytest
from unittest.mock import patch


@pytest.fixture
def aws_credentials():
    """Fake AWS credentials so moto never reaches real infrastructure."""
    with patch.dict(os.environ, {
        'AWS_ACCESS_KEY_ID': 'testing',
        'AWS_SECRET_ACCESS_KEY': 'testing',
        'AWS_SECURITY_TOKEN': 'testing',
        'AWS_SESSION_TOKEN': 'testing',
        'AWS_DEFAULT_REGION': 'us-east-1',
    }):
        yield


@pytest.fixture(autouse=True)
def reset_config():
    """Drop the cached config between tests."""
    import config
    config._config = None
    yield
    config._config = None
