"""
Pytest Configuration
====================

Loaded by pytest before collection. Puts src/ on sys.path so mesh_core
imports without installation.

Usage:
    cd src
    pytest tests/ -v
"""

import sys
from pathlib import Path

SRC_ROOT = Path(__file__).parent


def pytest_configure(config):
    if str(SRC_ROOT) not in sys.path:
        sys.path.insert(0, str(SRC_ROOT))


# Scripts import mesh_core outside pytest too
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))
