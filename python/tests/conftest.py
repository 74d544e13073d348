"""Pytest configuration and fixtures."""

import pytest
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))


@pytest.fixture
def sample_cedict_content():
    """Sample CC-CEDICT content with header comments."""
    return """# CC-CEDICT
# Community maintained free Chinese-English dictionary.
#! version=1
#! subversion=0
#! date=2024-05-01T04:33:55Z
一團火 一团火 [yi1 tuan2 huo3] /fireball/ball of fire/
一團 一团 [yi1 tuan2] /1 regiment/
一層 一层 [yi1 ceng2] /layer/
一攬子 一揽子 [yi1 lan3 zi5] /all-inclusive/undiscriminating/
一東一西 一东一西 [yi1 dong1 yi1 xi1] /far apart/
"""


@pytest.fixture
def sample_bad_line_content():
    """CC-CEDICT content with one malformed line in the middle."""
    return """# header
一層 一层 [yi1 ceng2] /layer/
一壁 一壁 [yi1 bi4 /one side/
一團 一团 [yi1 tuan2] /1 regiment/
"""
