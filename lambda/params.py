from errors import ValidationError

TRUTHY = ("true", "1", "yes")

# boto3 rejects numbers with more than 38 digits of precision
MAX_NUMBER_DIGITS = 38


def request_params(event):
    """Merge query string and path parameters; path parameters win."""
    params = dict(event.get("queryStringParameters") or {})
    params.update(event.get("pathParameters") or {})
    return params


def parse_movie_id(value):
    if value is None or str(value).strip() == "":
        raise ValidationError("movieId is required")
    try:
        movie_id = int(str(value).strip())
    except ValueError:
        raise ValidationError(f"movieId must be an integer, got {value!r}")
    if len(str(abs(movie_id))) > MAX_NUMBER_DIGITS:
        raise ValidationError(f"movieId must have at most {MAX_NUMBER_DIGITS} digits")
    return movie_id


def parse_flag(value):
    return str(value).strip().lower() in TRUTHY if value is not None else False


def optional_str(value):
    if value is None:
        return None
    value = value.strip()
    return value or None
