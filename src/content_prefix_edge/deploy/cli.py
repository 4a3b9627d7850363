# Copyright (c) 2024 OpenMined
# SPDX-License-Identifier: Apache-2.0
"""Command-line entry point for deploying the edge function.

Exit codes:
    0: Success
    1: Configuration error
    2: Deployment failed (the failing step is logged)
"""

from __future__ import annotations

import logging
import sys
import tempfile
from pathlib import Path

import click

from content_prefix_edge.exceptions import ConfigurationError, DeployError
from content_prefix_edge.settings import load_settings

from .bundle import build_bundle
from .deployer import Deployer

logger = logging.getLogger(__name__)

ERR_BAD_CONFIG = 1
ERR_DEPLOY_FAILED = 2


@click.command()
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="JSON file overriding the default deploy settings.",
)
@click.option(
    "--bundle",
    "bundle_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Prebuilt function zip. Built from the installed package when omitted.",
)
@click.option("--dry-run", is_flag=True, help="Log the plan without calling AWS.")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
def main(config_path: Path | None, bundle_path: Path | None, dry_run: bool, verbose: bool) -> None:
    """Bundle the /content prefix function and deploy it behind CloudFront."""
    logging.basicConfig(
        stream=sys.stderr,
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger("botocore").setLevel(logging.INFO)

    try:
        settings = load_settings(config_path)
    except ConfigurationError as e:
        logger.error("%s", e)
        sys.exit(ERR_BAD_CONFIG)

    with tempfile.TemporaryDirectory() as tmp:
        bundle = bundle_path or build_bundle(Path(tmp) / settings.bundle_key)

        if dry_run:
            logger.info("Dry run. Would deploy %s with settings:", bundle)
            for name, value in settings.model_dump().items():
                logger.info("  %s = %s", name, value)
            return

        try:
            result = Deployer(settings).deploy(bundle)
        except DeployError as e:
            logger.error("%s", e)
            sys.exit(ERR_DEPLOY_FAILED)

    click.echo(f"role:         {result.role_arn}")
    click.echo(f"function:     {result.function_arn}")
    click.echo(f"distribution: {result.distribution_id}")
    if result.domain_name:
        click.echo(f"domain:       https://{result.domain_name}")
