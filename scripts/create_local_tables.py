#!/usr/bin/env python3
"""Create DynamoDB tables for local development.

This script creates the schedule table needed for local development and testing, configured
against DynamoDB Local.

Usage:
    python scripts/create_local_tables.py
"""

import sys
from pathlib import Path

import boto3
from botocore.exceptions import ClientError

# Add src to path for config import
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from tripcore.config import get_config


def create_schedule_table(dynamodb, table_name):
    """Create the schedule table: one item per (ownerId, storageKey)."""
    try:
        dynamodb.create_table(
            TableName=table_name,
            KeySchema=[
                {"AttributeName": "ownerId", "KeyType": "HASH"},
                {"AttributeName": "storageKey", "KeyType": "RANGE"},
            ],
            AttributeDefinitions=[
                {"AttributeName": "ownerId", "AttributeType": "S"},
                {"AttributeName": "storageKey", "AttributeType": "S"},
            ],
            BillingMode="PAY_PER_REQUEST",
        )
        print(f"✓ Created {table_name} table")
    except ClientError as e:
        if e.response["Error"]["Code"] == "ResourceInUseException":
            print(f"✓ {table_name} table already exists")
        else:
            raise


def main():
    """Create the schedule table."""
    config = get_config()

    endpoint_url = config.dynamodb_endpoint or "http://localhost:8000"

    print(f"Creating DynamoDB tables at {endpoint_url}...")

    # For DynamoDB Local, use dummy credentials
    dynamodb = boto3.client(
        "dynamodb",
        endpoint_url=endpoint_url,
        region_name=config.aws_region,
        aws_access_key_id="dummy",
        aws_secret_access_key="dummy",
    )

    create_schedule_table(dynamodb, config.schedule_table)

    print("✅ All DynamoDB tables ready")


if __name__ == "__main__":
    main()
