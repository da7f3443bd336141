#
# Pytest Fixtures
#

# Standard library -----------------------------------------------------------------------------------------------------
import pathlib
import textwrap
from typing import Callable

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest


# Fixtures -------------------------------------------------------------------------------------------------------------

@pytest.fixture
def toml_file(tmp_path: pathlib.Path) -> Callable[..., pathlib.Path]:
    """Fixture to create a temporary TOML file with the given (dedented) content."""

    def _create_file(content: str, name: str = "memsize.toml") -> pathlib.Path:
        file_path = tmp_path / name
        file_path.write_text(textwrap.dedent(content), encoding="utf-8")
        return file_path

    return _create_file
