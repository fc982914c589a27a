import os
import sys

import boto3
import pytest
from moto import mock_aws

sys.path.insert(
    0, os.path.abspath(os.path.join(os.path.dirname(__file__), "../lambda"))
)
sys.path.insert(1, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

# MUST be set before any boto3 client is built
os.environ["AWS_ACCESS_KEY_ID"] = "testing"
os.environ["AWS_SECRET_ACCESS_KEY"] = "testing"
os.environ["AWS_SESSION_TOKEN"] = "testing"
os.environ["AWS_DEFAULT_REGION"] = "eu-west-1"
os.environ["REGION"] = "eu-west-1"
os.environ["TABLE_NAME"] = "Movies"
os.environ["MOVIE_TABLE_NAME"] = "Movies"
os.environ["CAST_TABLE_NAME"] = "MovieCast"

import store  # noqa: E402

MOVIES_TABLE = "Movies"
CAST_TABLE = "MovieCast"


@pytest.fixture(autouse=True)
def fresh_store():
    store.reset()
    yield
    store.reset()


def create_movies_table(dynamodb):
    return dynamodb.create_table(
        TableName=MOVIES_TABLE,
        KeySchema=[{"AttributeName": "id", "KeyType": "HASH"}],
        AttributeDefinitions=[{"AttributeName": "id", "AttributeType": "N"}],
        BillingMode="PAY_PER_REQUEST",
    )


def create_cast_table(dynamodb):
    return dynamodb.create_table(
        TableName=CAST_TABLE,
        KeySchema=[
            {"AttributeName": "movieId", "KeyType": "HASH"},
            {"AttributeName": "actorName", "KeyType": "RANGE"},
        ],
        AttributeDefinitions=[
            {"AttributeName": "movieId", "AttributeType": "N"},
            {"AttributeName": "actorName", "AttributeType": "S"},
            {"AttributeName": "roleName", "AttributeType": "S"},
        ],
        LocalSecondaryIndexes=[
            {
                "IndexName": "roleIx",
                "KeySchema": [
                    {"AttributeName": "movieId", "KeyType": "HASH"},
                    {"AttributeName": "roleName", "KeyType": "RANGE"},
                ],
                "Projection": {"ProjectionType": "ALL"},
            }
        ],
        BillingMode="PAY_PER_REQUEST",
    )


@pytest.fixture
def dynamodb():
    with mock_aws():
        yield boto3.resource("dynamodb", region_name="eu-west-1")


@pytest.fixture
def movies_table(dynamodb):
    return create_movies_table(dynamodb)


@pytest.fixture
def cast_table(dynamodb):
    return create_cast_table(dynamodb)
