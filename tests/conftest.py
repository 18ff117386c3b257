import sys
from pathlib import Path

import pytest

# Keep the repository free of Python bytecode and __pycache__ artifacts during tests.
sys.dont_write_bytecode = True

TESTS_ROOT = Path(__file__).resolve().parent
REPO_ROOT = TESTS_ROOT.parent
SRC_ROOT = REPO_ROOT / "src"

# Make src/ importable as 'modifiers' and tests/ importable for 'helpers'
for p in (SRC_ROOT, TESTS_ROOT):
    if str(p) not in sys.path:
        sys.path.insert(0, str(p))


from modifiers.core.config import ModifiersConfig
from modifiers.core.logging import reset_logging_for_tests
from modifiers.data import clear_caches


FIXTURES_ROOT = TESTS_ROOT / "fixtures"


@pytest.fixture(autouse=True)
def _reset_module_state():
    """Drop cached data files and installed log handlers between tests."""
    clear_caches()
    yield
    reset_logging_for_tests()
    clear_caches()


@pytest.fixture
def fixtures_root() -> Path:
    return FIXTURES_ROOT


@pytest.fixture
def config() -> ModifiersConfig:
    """Bundled defaults, isolated from the caller's MODIFIERS_* environment."""
    return ModifiersConfig(environ={})
