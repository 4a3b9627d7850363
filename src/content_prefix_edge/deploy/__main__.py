# Copyright (c) 2024 OpenMined
# SPDX-License-Identifier: Apache-2.0
"""Allow ``python -m content_prefix_edge.deploy``."""

from .cli import main

if __name__ == "__main__":
    main()
