# Copyright (c) 2024 OpenMined
# SPDX-License-Identifier: Apache-2.0
"""Build the zip uploaded as the Lambda function code.

Only the modules the edge handler imports are shipped.  They depend on
the standard library alone, so the bundle needs no vendored packages.
"""

from __future__ import annotations

import logging
import zipfile
from pathlib import Path

logger = logging.getLogger(__name__)

PACKAGE_DIR = Path(__file__).resolve().parent.parent

EDGE_MODULES = (
    "__init__.py",
    "completion.py",
    "event.py",
    "exceptions.py",
    "lambda_function.py",
    "rewriter.py",
)


def build_bundle(dest: str | Path, package_dir: Path = PACKAGE_DIR) -> Path:
    """Write the function bundle to *dest* and return its path.

    Args:
        dest: Path of the zip to create; parent directories are created.
        package_dir: Directory holding the ``content_prefix_edge`` sources.

    Raises:
        FileNotFoundError: If one of the edge modules is missing.
    """
    dest = Path(dest)
    dest.parent.mkdir(parents=True, exist_ok=True)

    with zipfile.ZipFile(dest, "w", compression=zipfile.ZIP_DEFLATED) as zf:
        for name in EDGE_MODULES:
            source = package_dir / name
            if not source.is_file():
                raise FileNotFoundError(f"Edge module not found: {source}")
            zf.write(source, arcname=f"{package_dir.name}/{name}")

    logger.info("Built bundle %s (%d modules)", dest, len(EDGE_MODULES))
    return dest
