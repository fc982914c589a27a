import json
import logging

from errors import respond

logger = logging.getLogger()


def lambda_handler(event, context):
    # Callers are authenticated by the IAM-signed function URL
    logger.info("Event: %s", json.dumps(event))
    http = (event.get("requestContext") or {}).get("http") or {}

    return respond(
        200,
        {
            "message": "Hello from the movies API",
            "method": http.get("method", "GET"),
            "path": event.get("rawPath", "/"),
        },
    )
