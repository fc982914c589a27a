import argparse
import os

import boto3

from seed.movies import movie_casts, movies


def key_of(item, key_names):
    return {name: item[name] for name in key_names}


def load(table, items, key_names):
    inserted = 0
    with table.batch_writer() as batch:
        for item in items:
            existing = table.get_item(Key=key_of(item, key_names))
            if "Item" in existing:
                print(f"Already exists in {table.name}: {key_of(item, key_names)}")
                continue

            batch.put_item(Item=item)
            inserted += 1
    print(f"Inserted {inserted} items into {table.name}")
    return inserted


def main(argv=None):
    parser = argparse.ArgumentParser(description="Load the movie fixtures into DynamoDB")
    parser.add_argument("--region", default=os.environ.get("REGION", "eu-west-1"))
    parser.add_argument("--movies-table", default=os.environ.get("MOVIE_TABLE_NAME", "Movies"))
    parser.add_argument("--cast-table", default=os.environ.get("CAST_TABLE_NAME", "MovieCast"))
    args = parser.parse_args(argv)

    dynamodb = boto3.resource("dynamodb", region_name=args.region)
    load(dynamodb.Table(args.movies_table), movies, ["id"])
    load(dynamodb.Table(args.cast_table), movie_casts, ["movieId", "actorName"])


if __name__ == "__main__":
    main()
