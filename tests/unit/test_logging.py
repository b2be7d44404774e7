"""Tests for logging configuration."""

import json
import logging

import pytest

from h5kit.io.rng import save_rng
from h5kit.io.store import delete
from h5kit.ui.logging import LOGGER_NAME, close_logging, setup_logging


@pytest.fixture(autouse=True)
def _reset_logging():
    yield
    close_logging()


def test_library_records_reach_log_file(tmp_path, seeded_rng):
    log_file = tmp_path / "logs" / "h5kit.log"
    setup_logging(log_file, level=logging.DEBUG)

    data = tmp_path / "state.h5"
    save_rng(data, seeded_rng)
    delete(data, "GLOBAL_RNG")
    close_logging()

    text = log_file.read_text()
    assert "Saved generator state to GLOBAL_RNG/" in text
    assert "Deleted GLOBAL_RNG" in text
    assert "h5kit.io.rng" in text


def test_json_log_file(tmp_path, seeded_rng):
    log_file = tmp_path / "h5kit.json"
    setup_logging(log_file)
    save_rng(tmp_path / "state.h5", seeded_rng)
    close_logging()

    records = [json.loads(line) for line in log_file.read_text().splitlines()]
    saved = [r for r in records if r["message"].startswith("Saved generator state")]
    assert saved
    assert saved[0]["level"] == "INFO"
    assert saved[0]["logger"] == "h5kit.io.rng"


def test_setup_without_handlers_is_silent():
    logger = setup_logging()
    assert logger.name == LOGGER_NAME
    assert all(isinstance(h, logging.NullHandler) for h in logger.handlers)


def test_setup_replaces_handlers(tmp_path):
    setup_logging(tmp_path / "a.log")
    logger = setup_logging(tmp_path / "b.log", verbose=True)
    assert len(logger.handlers) == 2
