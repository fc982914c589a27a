import aws_cdk as cdk
import pytest
from aws_cdk.assertions import Match, Template

from infra.stacks.movies_stack import MoviesStack


@pytest.fixture(scope="module")
def template():
    app = cdk.App()
    stack = MoviesStack(app, "TestMoviesStack", env=cdk.Environment(region="eu-west-1"))
    return Template.from_stack(stack)


def test_movies_table_schema(template):
    template.has_resource_properties(
        "AWS::DynamoDB::Table",
        {
            "TableName": "Movies",
            "KeySchema": [{"AttributeName": "id", "KeyType": "HASH"}],
            "BillingMode": "PAY_PER_REQUEST",
        },
    )


def test_cast_table_schema_with_role_index(template):
    template.has_resource_properties(
        "AWS::DynamoDB::Table",
        {
            "TableName": "MovieCast",
            "KeySchema": [
                {"AttributeName": "movieId", "KeyType": "HASH"},
                {"AttributeName": "actorName", "KeyType": "RANGE"},
            ],
            "LocalSecondaryIndexes": [
                Match.object_like(
                    {
                        "IndexName": "roleIx",
                        "KeySchema": [
                            {"AttributeName": "movieId", "KeyType": "HASH"},
                            {"AttributeName": "roleName", "KeyType": "RANGE"},
                        ],
                    }
                )
            ],
        },
    )


def test_handlers_share_runtime_settings(template):
    for handler in (
        "simple_handler.lambda_handler",
        "getmovies_handler.lambda_handler",
        "getcastmembers_handler.lambda_handler",
    ):
        template.has_resource_properties(
            "AWS::Lambda::Function",
            {
                "Handler": handler,
                "Runtime": "python3.12",
                "Architectures": ["arm64"],
                "Timeout": 10,
                "MemorySize": 128,
            },
        )


def test_function_urls(template):
    template.resource_properties_count_is(
        "AWS::Lambda::Url", {"AuthType": "NONE", "Cors": {"AllowOrigins": ["*"]}}, 2
    )
    template.resource_properties_count_is("AWS::Lambda::Url", {"AuthType": "AWS_IAM"}, 1)


def test_cast_function_environment(template):
    template.has_resource_properties(
        "AWS::Lambda::Function",
        {
            "Handler": "getcastmembers_handler.lambda_handler",
            "Environment": {
                "Variables": Match.object_like(
                    {"CAST_ROLE_INDEX": "roleIx", "REGION": "eu-west-1"}
                )
            },
        },
    )


def test_seed_custom_resource(template):
    template.resource_count_is("Custom::AWS", 1)


def test_url_outputs(template):
    outputs = template.find_outputs("*")
    assert {"SimpleFunctionUrl", "GetMoviesUrl", "GetMovieCastUrl"} <= set(outputs)
