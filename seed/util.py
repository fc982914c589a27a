from boto3.dynamodb.types import TypeSerializer

# BatchWriteItem accepts at most 25 put/delete requests per call
MAX_BATCH_SIZE = 25

_serializer = TypeSerializer()


def marshall(item):
    """Convert a plain dict into DynamoDB-JSON attribute values."""
    return {k: _serializer.serialize(v) for k, v in item.items() if v is not None}


def generate_item(item):
    return {"PutRequest": {"Item": marshall(item)}}


def generate_batch(items):
    return [generate_item(item) for item in items]
