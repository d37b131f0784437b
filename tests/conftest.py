import os
import sys

import pytest

# The modules live at the repository root; make them importable under pytest.
REPO_ROOT = os.path.dirname(os.path.dirname(__file__))
if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)


@pytest.fixture
def demo_source():
    return '\n  var abc = "abc"\n  alert(abc, 246)\n'
