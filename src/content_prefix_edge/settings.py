# Copyright (c) 2024 OpenMined
# SPDX-License-Identifier: Apache-2.0
"""Deployment settings.

Defaults reproduce the stack the function was first deployed with.  Any
field can be overridden from a JSON file passed to ``load_settings``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ValidationError

from content_prefix_edge.exceptions import ConfigurationError

# Lambda@Edge functions must live in us-east-1.
EdgeRegion = Literal["us-east-1"]
EDGE_REGION: EdgeRegion = "us-east-1"

EventType = Literal["viewer-request", "origin-request", "origin-response", "viewer-response"]


class DeploySettings(BaseModel):
    """Names and knobs used by the deployer.

    Attributes:
        region: AWS region for every client (always us-east-1)
        origin_bucket: S3 bucket CloudFront serves from
        source_bucket: S3 bucket holding the function bundle
        bucket_acl: Canned ACL applied to both buckets
        bundle_key: Object key of the uploaded bundle
        role_name: IAM role assumed by the function
        role_policy_name: Inline policy attached to the role
        function_name: Lambda function name
        runtime: Lambda runtime identifier
        handler: Dotted handler path inside the bundle
        description: Description attached to the published version
        event_type: CloudFront event the function is associated with
        role_propagation_seconds: Wait after creating the role before
            Lambda will accept it
        min_ttl: Minimum TTL of the default cache behaviour
    """

    region: EdgeRegion = EDGE_REGION
    origin_bucket: str = "content-prefix-edge-origin"
    source_bucket: str = "content-prefix-edge-source-code"
    bucket_acl: str = "public-read"
    bundle_key: str = "source.zip"
    role_name: str = "content-prefix-edge-role"
    role_policy_name: str = "content-prefix-edge-exec-policy"
    function_name: str = "content-prefix-edge-function"
    runtime: str = "python3.12"
    handler: str = "content_prefix_edge.lambda_function.handler"
    description: str = "Prefix viewer request URIs with /content"
    event_type: EventType = "viewer-request"
    role_propagation_seconds: float = 20.0
    min_ttl: int = 10


def load_settings(path: str | Path | None = None) -> DeploySettings:
    """Load settings from a JSON file, or return defaults when *path* is None.

    Raises:
        ConfigurationError: If the file is missing, unparseable, or names
            an unsupported region or event type.
    """
    if path is None:
        return DeploySettings()

    config_file = Path(path)
    if not config_file.is_file():
        raise ConfigurationError(f"Config file not found: {config_file}")

    try:
        return DeploySettings.model_validate_json(config_file.read_text())
    except ValidationError as e:
        raise ConfigurationError(f"Invalid config {config_file}: {e}") from e

