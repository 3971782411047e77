"""Shared test fixtures for the trip schedule and fare engine."""

import os
import sys
from pathlib import Path

import pytest
from dotenv import load_dotenv

# Load .env file for test configuration
load_dotenv()

# Unset AWS_PROFILE for local testing (DynamoDB Local doesn't need it)
if "AWS_PROFILE" in os.environ:
    del os.environ["AWS_PROFILE"]

# Add src directory to Python path for imports
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))


@pytest.fixture
def memory_backend():
    from tripcore.storage import InMemoryKeyValueStore

    return InMemoryKeyValueStore()


@pytest.fixture
def schedule_store(memory_backend):
    from tripcore.services.schedule_store import ScheduleStore

    return ScheduleStore(memory_backend)


# DynamoDB fixtures
@pytest.fixture
def dynamodb_client():
    """Provide a DynamoDB client for integration tests."""
    import boto3
    from tripcore.config import get_config

    config = get_config()

    return boto3.client(
        "dynamodb",
        endpoint_url=config.dynamodb_endpoint,
        region_name=config.aws_region,
        aws_access_key_id="dummy",
        aws_secret_access_key="dummy",
    )


@pytest.fixture
def schedule_table(dynamodb_client):
    """Provide the schedule table name, emptied after each test."""
    from tripcore.config import get_config

    table_name = get_config().schedule_table
    yield table_name

    # Cleanup: scan and delete all items created during test
    response = dynamodb_client.scan(TableName=table_name)
    for item in response.get("Items", []):
        dynamodb_client.delete_item(
            TableName=table_name,
            Key={"ownerId": item["ownerId"], "storageKey": item["storageKey"]},
        )
