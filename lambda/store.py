import os
import logging

import boto3
from botocore.config import Config

logger = logging.getLogger()

# Keep each store call well inside the 10s function timeout and leave
# retrying to the caller.
BOTO_CONFIG = Config(
    connect_timeout=2,
    read_timeout=5,
    retries={"total_max_attempts": 1, "mode": "standard"},
)

# Lazy singletons, reused across warm invocations
_dynamodb = None
_tables = {}


def movies_table_name():
    return os.environ.get("MOVIE_TABLE_NAME") or os.environ.get("TABLE_NAME", "Movies")


def cast_table_name():
    return os.environ.get("CAST_TABLE_NAME", "MovieCast")


def role_index_name():
    return os.environ.get("CAST_ROLE_INDEX", "roleIx")


def _get_dynamodb():
    global _dynamodb
    if _dynamodb is None:
        region = os.environ.get("REGION") or os.environ.get("AWS_DEFAULT_REGION")
        _dynamodb = boto3.resource("dynamodb", region_name=region, config=BOTO_CONFIG)
    return _dynamodb


def get_table(name):
    if name not in _tables:
        _tables[name] = _get_dynamodb().Table(name)
    return _tables[name]


def reset():
    """Drop the cached resource so the next call builds a fresh one."""
    global _dynamodb
    _dynamodb = None
    _tables.clear()


def scan_all(table, **kwargs):
    items = []
    start_key = None

    while True:
        if start_key:
            kwargs["ExclusiveStartKey"] = start_key

        resp = table.scan(**kwargs)
        logger.debug("Scan response: %s", resp)
        items.extend(resp.get("Items", []))
        start_key = resp.get("LastEvaluatedKey")
        if not start_key:
            break

    return items


def query_all(table, **kwargs):
    items = []
    start_key = None

    while True:
        if start_key:
            kwargs["ExclusiveStartKey"] = start_key

        resp = table.query(**kwargs)
        logger.debug("Query response: %s", resp)
        items.extend(resp.get("Items", []))
        start_key = resp.get("LastEvaluatedKey")
        if not start_key:
            break

    return items


def get_item(table, key):
    """Return the item stored under ``key`` or None."""
    resp = table.get_item(Key=key)
    logger.debug("GetItem response: %s", resp)
    return resp.get("Item")
