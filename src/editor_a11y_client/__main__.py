# SPDX-License-Identifier: MIT
# Copyright 2025-2026 dnz3d4c
"""python -m editor_a11y_client 진입점"""
import sys

from editor_a11y_client.main import main

if __name__ == "__main__":
    sys.exit(main())
