# infra/stacks/movies_stack.py

from pathlib import Path

from aws_cdk import (
    Stack,
    Duration,
    RemovalPolicy,
    CfnOutput,
    aws_dynamodb as dynamodb,
    aws_iam as iam,
    aws_lambda as _lambda,
    custom_resources as cr,
)
from constructs import Construct

from seed.movies import movies, movie_casts
from seed.util import generate_batch

LAMBDA_DIR = str(Path(__file__).resolve().parents[2] / "lambda")


class MoviesStack(Stack):
    def __init__(self, scope: Construct, construct_id: str, **kwargs) -> None:
        super().__init__(scope, construct_id, **kwargs)

        region = self.node.try_get_context("region") or "eu-west-1"

        # ===============
        # Simple function
        # ===============
        simple_fn = self._function("SimpleFn", "simple_handler.lambda_handler")
        simple_fn_url = simple_fn.add_function_url(
            auth_type=_lambda.FunctionUrlAuthType.AWS_IAM,
            cors=_lambda.FunctionUrlCorsOptions(allowed_origins=["*"]),
        )
        CfnOutput(self, "SimpleFunctionUrl", value=simple_fn_url.url)

        # =========
        # DynamoDB
        # =========
        movies_table = dynamodb.Table(
            self,
            "MoviesTable",
            partition_key=dynamodb.Attribute(name="id", type=dynamodb.AttributeType.NUMBER),
            billing_mode=dynamodb.BillingMode.PAY_PER_REQUEST,
            removal_policy=RemovalPolicy.DESTROY,
            table_name="Movies",
        )

        movie_casts_table = dynamodb.Table(
            self,
            "MovieCastTable",
            partition_key=dynamodb.Attribute(name="movieId", type=dynamodb.AttributeType.NUMBER),
            sort_key=dynamodb.Attribute(name="actorName", type=dynamodb.AttributeType.STRING),
            billing_mode=dynamodb.BillingMode.PAY_PER_REQUEST,
            removal_policy=RemovalPolicy.DESTROY,
            table_name="MovieCast",
        )
        # Role lookups within a movie (backend expects roleIx)
        movie_casts_table.add_local_secondary_index(
            index_name="roleIx",
            sort_key=dynamodb.Attribute(name="roleName", type=dynamodb.AttributeType.STRING),
        )

        # ==========
        # Seed data
        # ==========
        cr.AwsCustomResource(
            self,
            "MoviesDdbInitData",
            on_create=cr.AwsSdkCall(
                service="DynamoDB",
                action="batchWriteItem",
                parameters={
                    "RequestItems": {
                        movies_table.table_name: generate_batch(movies),
                        movie_casts_table.table_name: generate_batch(movie_casts),
                    }
                },
                physical_resource_id=cr.PhysicalResourceId.of("moviesddbInitData"),
            ),
            policy=cr.AwsCustomResourcePolicy.from_sdk_calls(
                resources=[movies_table.table_arn, movie_casts_table.table_arn]
            ),
        )

        # ==============
        # Movies lookup
        # ==============
        get_movies_fn = self._function(
            "GetMoviesFn",
            "getmovies_handler.lambda_handler",
            environment={
                "TABLE_NAME": movies_table.table_name,
                "REGION": region,
            },
        )
        movies_table.grant_read_data(get_movies_fn)
        get_movies_url = get_movies_fn.add_function_url(
            auth_type=_lambda.FunctionUrlAuthType.NONE,
            cors=_lambda.FunctionUrlCorsOptions(allowed_origins=["*"]),
        )
        CfnOutput(self, "GetMoviesUrl", value=get_movies_url.url)

        # ============
        # Cast lookup
        # ============
        get_cast_fn = self._function(
            "GetCastMembersFn",
            "getcastmembers_handler.lambda_handler",
            environment={
                "CAST_TABLE_NAME": movie_casts_table.table_name,
                "MOVIE_TABLE_NAME": movies_table.table_name,
                "CAST_ROLE_INDEX": "roleIx",
                "REGION": region,
            },
        )
        movies_table.grant_read_data(get_cast_fn)
        movie_casts_table.grant_read_data(get_cast_fn)
        get_cast_fn.add_to_role_policy(
            iam.PolicyStatement(
                actions=["dynamodb:GetItem", "dynamodb:Query"],
                resources=[
                    movies_table.table_arn,
                    movie_casts_table.table_arn,
                    f"{movie_casts_table.table_arn}/index/roleIx",
                ],
            )
        )
        get_cast_url = get_cast_fn.add_function_url(
            auth_type=_lambda.FunctionUrlAuthType.NONE,
            cors=_lambda.FunctionUrlCorsOptions(allowed_origins=["*"]),
        )
        CfnOutput(self, "GetMovieCastUrl", value=get_cast_url.url)

    def _function(self, construct_id, handler, environment=None):
        return _lambda.Function(
            self,
            construct_id,
            runtime=_lambda.Runtime.PYTHON_3_12,
            architecture=_lambda.Architecture.ARM_64,
            handler=handler,
            code=_lambda.Code.from_asset(LAMBDA_DIR),
            memory_size=128,
            timeout=Duration.seconds(10),
            environment=environment or {},
        )
