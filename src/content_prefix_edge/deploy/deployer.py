# Copyright (c) 2024 OpenMined
# SPDX-License-Identifier: Apache-2.0
"""Provision the edge function on AWS.

Runs the full deployment flow:
1. Create the origin and source-code S3 buckets
2. Upload the function bundle
3. Create the IAM execution role
4. Wait for the role to propagate
5. Create the Lambda function and publish a version
6. Create a CloudFront distribution with the version associated
"""

from __future__ import annotations

import json
import logging
import time
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import backoff
import boto3
from botocore.exceptions import BotoCoreError, ClientError

from content_prefix_edge.exceptions import DeployError
from content_prefix_edge.settings import DeploySettings

logger = logging.getLogger(__name__)

AWS_ERRORS = (ClientError, BotoCoreError)

ORIGIN_ID = "ORIGIN_ID"

ASSUME_ROLE_POLICY = {
    "Version": "2012-10-17",
    "Statement": [
        {
            "Effect": "Allow",
            "Principal": {"Service": ["lambda.amazonaws.com", "edgelambda.amazonaws.com"]},
            "Action": "sts:AssumeRole",
        }
    ],
}

LOGS_POLICY = {
    "Version": "2012-10-17",
    "Statement": [
        {
            "Effect": "Allow",
            "Action": ["logs:CreateLogGroup", "logs:CreateLogStream", "logs:PutLogEvents"],
            "Resource": ["arn:aws:logs:*:*:*"],
        }
    ],
}


@dataclass(frozen=True)
class DeployResult:
    """Identifiers of the resources a deploy created.

    Attributes:
        role_arn:        ARN of the execution role.
        function_arn:    Versioned ARN associated with the distribution.
        distribution_id: CloudFront distribution id.
        domain_name:     ``*.cloudfront.net`` host of the distribution.
    """

    role_arn: str
    function_arn: str
    distribution_id: str
    domain_name: str = ""


def _on_backoff(details: dict[str, Any]) -> None:
    logger.warning(
        "Backing off %.1f seconds after %d tries calling %s",
        details["wait"],
        details["tries"],
        details["target"].__name__,
    )


class Deployer:
    """Creates every AWS resource the edge function needs.

    Clients are built from ``settings.region`` on first use unless
    injected, which is how tests substitute mocks.

    Example:
        deployer = Deployer(load_settings("deploy.json"))
        result = deployer.deploy(build_bundle("build/source.zip"))
    """

    def __init__(
        self,
        settings: DeploySettings,
        *,
        s3: Any = None,
        iam: Any = None,
        lambda_: Any = None,
        cloudfront: Any = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.settings = settings
        self._clients: dict[str, Any] = {
            "s3": s3,
            "iam": iam,
            "lambda": lambda_,
            "cloudfront": cloudfront,
        }
        self._sleep = sleep

    def _client(self, service: str) -> Any:
        if self._clients[service] is None:
            self._clients[service] = boto3.client(service, region_name=self.settings.region)
        return self._clients[service]

    # ── Steps ────────────────────────────────────────────────

    def create_buckets(self) -> None:
        s3 = self._client("s3")
        for bucket in (self.settings.origin_bucket, self.settings.source_bucket):
            params: dict[str, Any] = {"Bucket": bucket}
            if self.settings.bucket_acl:
                params["ACL"] = self.settings.bucket_acl
            try:
                s3.create_bucket(**params)
            except AWS_ERRORS as e:
                raise DeployError("create_buckets", f"could not create bucket {bucket}: {e}") from e
            logger.info("Created bucket %s", bucket)

    def upload_bundle(self, bundle: str | Path) -> None:
        bundle = Path(bundle)
        if not bundle.is_file():
            raise DeployError("upload_bundle", f"bundle not found: {bundle}")
        try:
            self._upload(bundle)
        except AWS_ERRORS as e:
            raise DeployError("upload_bundle", str(e)) from e
        logger.info(
            "Uploaded %s to s3://%s/%s", bundle, self.settings.source_bucket, self.settings.bundle_key
        )

    @backoff.on_exception(backoff.expo, AWS_ERRORS, on_backoff=_on_backoff, max_time=120)
    def _upload(self, bundle: Path) -> None:
        self._client("s3").upload_file(
            str(bundle), self.settings.source_bucket, self.settings.bundle_key
        )

    def create_role(self) -> str:
        iam = self._client("iam")
        try:
            response = iam.create_role(
                Path="/service-role/",
                RoleName=self.settings.role_name,
                AssumeRolePolicyDocument=json.dumps(ASSUME_ROLE_POLICY),
            )
            iam.put_role_policy(
                RoleName=self.settings.role_name,
                PolicyName=self.settings.role_policy_name,
                PolicyDocument=json.dumps(LOGS_POLICY),
            )
        except AWS_ERRORS as e:
            raise DeployError("create_role", str(e)) from e

        role_arn = response["Role"]["Arn"]
        logger.info("Created role %s", role_arn)
        return role_arn

    def create_function(self, role_arn: str) -> str:
        """Create the function, publish a version and return the versioned ARN.

        CloudFront only accepts a numbered version, never ``$LATEST``.
        """
        client = self._client("lambda")
        try:
            created = client.create_function(
                FunctionName=self.settings.function_name,
                Runtime=self.settings.runtime,
                Role=role_arn,
                Handler=self.settings.handler,
                Code={
                    "S3Bucket": self.settings.source_bucket,
                    "S3Key": self.settings.bundle_key,
                },
            )
            published = client.publish_version(
                FunctionName=created["FunctionArn"],
                Description=self.settings.description,
            )
        except AWS_ERRORS as e:
            raise DeployError("create_function", str(e)) from e

        function_arn = f"{created['FunctionArn']}:{published['Version']}"
        logger.info("Published %s", function_arn)
        return function_arn

    def distribution_config(self, function_arn: str) -> dict[str, Any]:
        origin_bucket = self.settings.origin_bucket
        return {
            "CallerReference": origin_bucket,
            "Comment": origin_bucket,
            "Enabled": True,
            "Origins": {
                "Quantity": 1,
                "Items": [
                    {
                        "Id": ORIGIN_ID,
                        "DomainName": f"{origin_bucket}.s3.amazonaws.com",
                        "S3OriginConfig": {"OriginAccessIdentity": ""},
                    }
                ],
            },
            "DefaultCacheBehavior": {
                "TargetOriginId": ORIGIN_ID,
                "ViewerProtocolPolicy": "redirect-to-https",
                "MinTTL": self.settings.min_ttl,
                "Compress": True,
                "LambdaFunctionAssociations": {
                    "Quantity": 1,
                    "Items": [
                        {
                            "LambdaFunctionARN": function_arn,
                            "EventType": self.settings.event_type,
                            "IncludeBody": False,
                        }
                    ],
                },
                "ForwardedValues": {
                    "QueryString": False,
                    "Cookies": {"Forward": "none"},
                },
                "TrustedSigners": {"Enabled": False, "Quantity": 0},
            },
        }

    def create_distribution(self, function_arn: str) -> tuple[str, str]:
        """Create the distribution and return ``(id, domain_name)``."""
        try:
            response = self._client("cloudfront").create_distribution(
                DistributionConfig=self.distribution_config(function_arn)
            )
        except AWS_ERRORS as e:
            raise DeployError("create_distribution", str(e)) from e

        distribution = response["Distribution"]
        logger.info("Created distribution %s (%s)", distribution["Id"], distribution["DomainName"])
        return distribution["Id"], distribution["DomainName"]

    # ── Full flow ────────────────────────────────────────────

    def deploy(self, bundle: str | Path) -> DeployResult:
        self.create_buckets()
        self.upload_bundle(bundle)
        role_arn = self.create_role()

        # Lambda rejects a freshly created role until IAM has propagated it.
        logger.info("Waiting %.0fs for role propagation", self.settings.role_propagation_seconds)
        self._sleep(self.settings.role_propagation_seconds)

        function_arn = self.create_function(role_arn)
        distribution_id, domain_name = self.create_distribution(function_arn)
        return DeployResult(
            role_arn=role_arn,
            function_arn=function_arn,
            distribution_id=distribution_id,
            domain_name=domain_name,
        )
