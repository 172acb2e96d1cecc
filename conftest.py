"""
Pytest configuration.

Puts the project root on sys.path so the tests can import the top-level
modules (graph, erdos, ws, ...) without installing the project.
"""

import sys
from pathlib import Path

project_root = Path(__file__).parent

if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))
