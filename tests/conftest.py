from pathlib import Path

import pytest
from fakes import DARK, block_image


@pytest.fixture
def work_dir(tmp_path: Path) -> Path:
    """Work dir holding a canonical dark screenshot."""
    block_image(DARK).save(tmp_path / 'layout-canonical-dark.jpg')
    return tmp_path
