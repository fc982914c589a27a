"""
Cast lookup for a single movie.

Query string parameters:
    movieId      required, integer partition key of MovieCast
    actorName    exact match on the table sort key
    roleName     exact match via the roleIx local secondary index
    movie        "true" to nest the parent movie under "movie" on every row
                 (includeMovieMetadata is accepted as an alias)
"""
import json
import logging
from dataclasses import dataclass
from typing import Optional

from boto3.dynamodb.conditions import Attr, Key

import store
from errors import handle_errors, success_response
from params import optional_str, parse_flag, parse_movie_id, request_params

logger = logging.getLogger()


@dataclass(frozen=True)
class CastQuery:
    movie_id: int
    actor_name: Optional[str] = None
    role_name: Optional[str] = None
    include_movie: bool = False

    @classmethod
    def from_event(cls, event):
        params = request_params(event)
        include = params.get("movie")
        if include is None:
            include = params.get("includeMovieMetadata")
        return cls(
            movie_id=parse_movie_id(params.get("movieId")),
            actor_name=optional_str(params.get("actorName")),
            role_name=optional_str(params.get("roleName")),
            include_movie=parse_flag(include),
        )


def query_kwargs(query: CastQuery):
    partition = Key("movieId").eq(query.movie_id)

    if query.actor_name:
        kwargs = {"KeyConditionExpression": partition & Key("actorName").eq(query.actor_name)}
        if query.role_name:
            kwargs["FilterExpression"] = Attr("roleName").eq(query.role_name)
        return kwargs

    if query.role_name:
        return {
            "IndexName": store.role_index_name(),
            "KeyConditionExpression": partition & Key("roleName").eq(query.role_name),
        }

    return {"KeyConditionExpression": partition}


def enrich(cast, movie):
    # Every row gets its own copy of the same metadata
    return [dict(member, movie=dict(movie)) for member in cast]


def find_cast(query: CastQuery):
    cast_table = store.get_table(store.cast_table_name())
    cast = store.query_all(cast_table, **query_kwargs(query))
    if not cast or not query.include_movie:
        return cast

    movies_table = store.get_table(store.movies_table_name())
    movie = store.get_item(movies_table, {"id": query.movie_id})
    if movie is None:
        logger.warning("Movie %s not found, returning cast without metadata", query.movie_id)
        return cast
    return enrich(cast, movie)


@handle_errors
def lambda_handler(event, context):
    logger.info("Event: %s", json.dumps(event))
    query = CastQuery.from_event(event)
    cast = find_cast(query)
    logger.info("Returning %d cast members for movie %s", len(cast), query.movie_id)
    return success_response(cast)
