#!/usr/bin/env python3
import os
import aws_cdk as cdk
from infra.stacks.movies_stack import MoviesStack

app = cdk.App()

env = cdk.Environment(
    account=os.getenv("CDK_DEFAULT_ACCOUNT"),
    region=os.getenv("CDK_DEFAULT_REGION", "eu-west-1"),
)

MoviesStack(app, "MoviesStack", env=env)

app.synth()
