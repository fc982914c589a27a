"""
Movie lookup.

With no parameters every movie is returned from a full scan. A movieId
query string or path parameter switches to a single get_item; it must be
an integer, and a malformed value is rejected with 400 rather than
falling back to the scan.
"""
import json
import logging

import store
from errors import handle_errors, success_response
from params import parse_movie_id, request_params

logger = logging.getLogger()


@handle_errors
def lambda_handler(event, context):
    logger.info("Event: %s", json.dumps(event))
    params = request_params(event)
    movie_id = parse_movie_id(params["movieId"]) if params.get("movieId") is not None else None
    table = store.get_table(store.movies_table_name())

    # Point lookup when a movieId is supplied, full scan otherwise
    if movie_id is not None:
        movie = store.get_item(table, {"id": movie_id})
        movies = [movie] if movie else []
    else:
        movies = store.scan_all(table)

    logger.info("Returning %d movies", len(movies))
    return success_response(movies)
