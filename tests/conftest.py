"""Test setup.

The widget modules live at the repository root rather than in a package,
so the root goes on ``sys.path`` before the tests import ``weather``,
``colors``, ``widget`` and ``app``.
"""

import sys
from pathlib import Path

repo_root = Path(__file__).resolve().parents[1]
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))
