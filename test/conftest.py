import logging
from pathlib import Path

import pytest

DATA_DIR = Path(__file__).resolve().parent / "data" / "msa"


def pytest_configure(config):
    """Set up test environment before tests run."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logging.getLogger("msavalidator").setLevel(logging.DEBUG)


@pytest.fixture
def msa_data_dir() -> Path:
    return DATA_DIR
