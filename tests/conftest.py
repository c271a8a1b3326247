import sys
import pytest
from pathlib import Path

from enumkit import EnumRegistry

# Allow the import of support modules for tests
sys.path.append(str(Path(__file__).resolve().parent))


@pytest.fixture
def registry() -> EnumRegistry:
    # A private registry per test keeps registrations and seals from leaking
    return EnumRegistry(strict=True)
