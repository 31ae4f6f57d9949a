"""
Tests for the HTTP routes using in-memory fakes for the AWS services.
"""
import pytest
from concurrent.futures import ThreadPoolExecutor
from unittest.mock import Mock
from app import create_app
from services.ssm_service import SSMService
from utils.exceptions import ParameterStoreError, S3OperationError

VERSION = '1.4.2'


class FakeBuckets:
    """BucketLister returning fixed names or raising."""

    def __init__(self, names=None, error=None):
        self.names = names or []
        self.error = error
        self.calls = 0

    def list_bucket_names(self):
        self.calls += 1
        if self.error:
            raise self.error
        return list(self.names)


class FakeParameters:
    """ParameterStore backed by a dict."""

    def __init__(self, values=None, error=None):
        self.values = values or {}
        self.error = error
        self.calls = 0

    def list_parameter_names(self):
        self.calls += 1
        if self.error:
            raise self.error
        return list(self.values)

    def get_parameter_value(self, name):
        self.calls += 1
        if self.error:
            raise self.error
        if name not in self.values:
            raise ParameterStoreError(
                f'Failed to get parameter {name}',
                parameter_name=name,
                operation='get_parameter',
                error_code='ParameterNotFound'
            )
        return self.values[name]


@pytest.fixture
def buckets():
    return FakeBuckets(['a', 'b'])


@pytest.fixture
def parameters():
    return FakeParameters({'foo': 'bar', 'baz': 'qux'})


@pytest.fixture
def client(buckets, parameters):
    app = create_app(VERSION, buckets, parameters)
    app.config['TESTING'] = True
    return app.test_client()


class TestLivez:
    """Tests for the liveness route."""

    def test_livez_ok_without_backend_calls(self):
        """Test /livez answers 200 with no AWS traffic."""
        buckets = Mock()
        parameters = Mock()
        app = create_app(VERSION, buckets, parameters)

        response = app.test_client().get('/livez')

        assert response.status_code == 200
        assert response.data == b''
        assert buckets.mock_calls == []
        assert parameters.mock_calls == []

    def test_livez_ok_when_backend_broken(self):
        """Test /livez ignores backend health."""
        error = S3OperationError('down')
        app = create_app(
            VERSION,
            FakeBuckets(error=error),
            FakeParameters(error=ParameterStoreError('down'))
        )

        assert app.test_client().get('/livez').status_code == 200


class TestBuckets:
    """Tests for GET /buckets."""

    def test_list_buckets(self, client):
        """Test bucket names are wrapped in the envelope."""
        response = client.get('/buckets')

        assert response.status_code == 200
        assert response.get_json() == {'version': VERSION, 'data': ['a', 'b']}

    def test_list_buckets_empty(self, parameters):
        """Test no buckets yields an empty list, not null."""
        app = create_app(VERSION, FakeBuckets([]), parameters)

        response = app.test_client().get('/buckets')

        assert response.get_json() == {'version': VERSION, 'data': []}

    def test_list_buckets_error(self, parameters):
        """Test a backend error yields 500 with an empty body."""
        buckets = FakeBuckets(error=S3OperationError(
            'Failed to list buckets: AccessDenied', operation='list_buckets'
        ))
        app = create_app(VERSION, buckets, parameters)

        response = app.test_client().get('/buckets')

        assert response.status_code == 500
        assert response.data == b''


class TestParameters:
    """Tests for GET /parameters and GET /parameters/<name>."""

    def test_list_parameters(self, client):
        """Test parameter names are wrapped in the envelope."""
        response = client.get('/parameters')

        assert response.status_code == 200
        assert response.get_json() == {
            'version': VERSION,
            'data': ['foo', 'baz'],
        }

    def test_list_parameters_error(self, buckets):
        """Test a backend error yields 500 with an empty body."""
        app = create_app(
            VERSION, buckets, FakeParameters(error=ParameterStoreError('boom'))
        )

        response = app.test_client().get('/parameters')

        assert response.status_code == 500
        assert response.data == b''

    def test_get_parameter(self, client):
        """Test a stored value is returned as a string."""
        response = client.get('/parameters/foo')

        assert response.status_code == 200
        assert response.get_json() == {'version': VERSION, 'data': 'bar'}

    def test_get_parameter_missing(self, client):
        """Test an unknown name yields 404 with an empty body."""
        response = client.get('/parameters/missing')

        assert response.status_code == 404
        assert response.data == b''

    def test_get_parameter_any_error_is_not_found(self, buckets):
        """Test non-lookup failures are also reported as 404."""
        error = ParameterStoreError(
            'throttled', parameter_name='foo', error_code='ThrottlingException'
        )
        app = create_app(VERSION, buckets, FakeParameters(error=error))

        response = app.test_client().get('/parameters/foo')

        assert response.status_code == 404
        assert response.data == b''

    def test_get_parameter_nested_path_not_routed(self, client, parameters):
        """Test a name containing a slash does not match the route."""
        response = client.get('/parameters/app/db')

        assert response.status_code == 404
        assert parameters.calls == 0


class TestEnvelope:
    """Tests for envelope stability and request isolation."""

    def test_version_constant_across_requests(self, client):
        """Test every envelope carries the configured version unchanged."""
        versions = {
            client.get(path).get_json()['version']
            for path in ['/buckets', '/parameters', '/parameters/foo'] * 3
        }

        assert versions == {VERSION}

    def test_unexpected_errors_not_swallowed(self, parameters):
        """Test only declared remote errors are mapped to empty responses."""
        app = create_app(
            VERSION, FakeBuckets(error=RuntimeError('bug')), parameters
        )

        response = app.test_client().get('/buckets')

        assert response.status_code == 500
        assert response.data != b''

    def test_concurrent_requests_do_not_interfere(self, buckets, parameters):
        """Test parallel requests to different routes see their own data."""
        app = create_app(VERSION, buckets, parameters)
        expected = {
            '/buckets': ['a', 'b'],
            '/parameters': ['foo', 'baz'],
            '/parameters/foo': 'bar',
            '/parameters/baz': 'qux',
        }

        def fetch(path):
            response = app.test_client().get(path)
            return path, response.status_code, response.get_json()

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(fetch, list(expected) * 10))

        for path, status, body in results:
            assert status == 200
            assert body == {'version': VERSION, 'data': expected[path]}


def test_get_parameter_malformed_response_is_not_found(buckets):
    """Test a response missing its value still yields an empty 404."""
    ssm_client = Mock()
    ssm_client.get_parameter.return_value = {'Parameter': {'Name': 'foo'}}
    app = create_app(VERSION, buckets, SSMService(ssm_client))

    response = app.test_client().get('/parameters/foo')

    assert response.status_code == 404
    assert response.data == b''
