from pathlib import Path

import pytest
from loguru import logger

DATA_DIR = Path(__file__).parent / "data"


@pytest.fixture
def log_messages():
    """Collect Loguru messages emitted during a test."""
    messages = []
    logger.enable("suppressions")
    sink_id = logger.add(lambda message: messages.append(message.record), level="DEBUG")
    yield messages
    logger.remove(sink_id)
    logger.disable("suppressions")


@pytest.fixture(scope="session")
def pmd_reference():
    """Golden NAME -> token pairs for every PMD rule, in declaration order."""
    pairs = []
    for line in (DATA_DIR / "pmd_reference.txt").read_text().splitlines():
        if line.strip():
            name, value = line.split("=", 1)
            pairs.append((name, value))
    return pairs
