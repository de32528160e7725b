"""Shared pytest fixtures."""

from pathlib import Path

import pytest
from loguru import logger
from omegaconf import OmegaConf

FIXTURES_PATH = Path(__file__).parent / "fixtures"


def load_fixture(name: str) -> dict:
    """Load a YAML resume fixture as plain containers."""
    return OmegaConf.to_container(OmegaConf.load(FIXTURES_PATH / name), resolve=True)


@pytest.fixture
def full_resume() -> dict:
    return load_fixture("full_resume.yaml")


@pytest.fixture
def hostile_resume() -> dict:
    return load_fixture("hostile_resume.yaml")


@pytest.fixture
def captured_logs():
    """Collect formatted loguru messages emitted while the test runs."""
    messages = []
    logger.enable("vitae")
    handler_id = logger.add(messages.append, level="DEBUG", format="{level} | {message}")
    yield messages
    logger.remove(handler_id)
    logger.disable("vitae")
