# Copyright (c) 2024 OpenMined
# SPDX-License-Identifier: Apache-2.0
"""Deployment tooling: bundle the edge function and provision it on AWS.

Usage:
    content-prefix-edge-deploy --config deploy.json

Exports:
    Deployer: Creates buckets, role, function and distribution
    DeployResult: Identifiers of everything a deploy created
    build_bundle: Zips the edge modules for upload
"""

from .bundle import EDGE_MODULES, build_bundle
from .deployer import Deployer, DeployResult

__all__ = [
    "EDGE_MODULES",
    "DeployResult",
    "Deployer",
    "build_bundle",
]
