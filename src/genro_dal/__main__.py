# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""CLI entry point for genro-dal (gdal command).

Usage:
    gdal --help
    python -m genro_dal --db ./app.db query "SELECT 1 AS one"
"""

from .cli import main

if __name__ == "__main__":
    main()
