"""
Test configuration and fixtures for the Shortlink service.
This centralizes all test setup, making individual tests clean.
"""

import os

import boto3
import pytest
from fastapi.testclient import TestClient
from moto import mock_aws

from shortlink_app.app import create_app
from shortlink_app.config import Settings
from shortlink_app.context import AppContext
from shortlink_app.core.exceptions import StoreError
from shortlink_app.storage.strategies import InMemoryMappingStore, MappingStore

TEST_DOMAIN = "sho.rt"
TEST_TABLE = "url-mappings-test"


class FailingMappingStore(MappingStore):
    """Store whose backend is always unreachable"""

    def __init__(self):
        self.calls = 0

    def put(self, mapping):
        self.calls += 1
        raise StoreError("connection refused")

    def get(self, short_code):
        self.calls += 1
        raise StoreError("connection refused")


class RecordingMappingStore(InMemoryMappingStore):
    """In-memory store that counts backend round-trips"""

    def __init__(self):
        super().__init__()
        self.puts = 0
        self.gets = 0

    def put(self, mapping):
        self.puts += 1
        super().put(mapping)

    def get(self, short_code):
        self.gets += 1
        return super().get(short_code)


@pytest.fixture(scope="function")
def settings():
    """Settings built explicitly, without reading a .env file"""
    return Settings(
        _env_file=None,
        dynamodb_table_name=TEST_TABLE,
        domain_name=TEST_DOMAIN,
        aws_region="us-east-1",
        store_backend="memory",
    )


@pytest.fixture(scope="function")
def store():
    """
    Create a fresh store for each test.
    This ensures tests are isolated and don't affect each other.
    """
    return RecordingMappingStore()


def _client_for(settings, store):
    app = create_app(AppContext(settings=settings, store=store))
    return TestClient(app)


@pytest.fixture(scope="function")
def client(settings, store):
    """
    Create a test client around the in-memory store.
    This is the main fixture that tests will use.
    """
    with _client_for(settings, store) as test_client:
        yield test_client


@pytest.fixture(scope="function")
def failing_store():
    return FailingMappingStore()


@pytest.fixture(scope="function")
def failing_client(settings, failing_store):
    """Test client whose store fails every call"""
    with _client_for(settings, failing_store) as test_client:
        yield test_client


@pytest.fixture(scope="function")
def aws_credentials(monkeypatch):
    """Mocked AWS Credentials for moto."""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_SECURITY_TOKEN", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", "us-east-1")
    yield


@pytest.fixture(scope="function")
def dynamodb_table(aws_credentials):
    """Create mocked DynamoDB table with the mapping schema."""
    with mock_aws():
        dynamodb = boto3.resource("dynamodb", region_name="us-east-1")
        table = dynamodb.create_table(
            TableName=TEST_TABLE,
            KeySchema=[{"AttributeName": "ShortCode", "KeyType": "HASH"}],
            AttributeDefinitions=[{"AttributeName": "ShortCode", "AttributeType": "S"}],
            BillingMode="PAY_PER_REQUEST",
        )
        table.wait_until_exists()
        yield table


@pytest.fixture(scope="function")
def clean_env(monkeypatch, tmp_path):
    """
    Remove service variables from the environment and run from an empty
    directory so no .env file is picked up.
    """
    for name in (
        "DYNAMODB_TABLE_NAME",
        "DOMAIN_NAME",
        "AWS_REGION",
        "STORE_BACKEND",
        "DYNAMODB_ENDPOINT_URL",
        "SHORT_URL_SCHEME",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    yield os.environ
