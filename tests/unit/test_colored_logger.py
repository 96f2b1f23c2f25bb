"""Unit tests for the stage-colored operation logger."""

import logging

import pytest

from news_agency.infrastructure.logging.colored_logger import OperationLogger, StoreStage


def test_timed_step_logs_start_and_completion(caplog):
    log = OperationLogger("tests.store", level=logging.INFO)
    with caplog.at_level(logging.INFO, logger="tests.store"):
        with log.timed_step(StoreStage.READ, "Listing articles", region="Delhi"):
            pass

    assert len(caplog.records) == 2
    assert "[READ]" in caplog.records[0].getMessage()
    assert "region=Delhi" in caplog.records[0].getMessage()
    assert "✓ Listing articles" in caplog.records[1].getMessage()


def test_timed_step_logs_failure_and_reraises(caplog):
    log = OperationLogger("tests.store")
    with caplog.at_level(logging.WARNING, logger="tests.store"):
        with pytest.raises(RuntimeError):
            with log.timed_step(StoreStage.UPDATE, "Updating article"):
                raise RuntimeError("boom")

    assert [r.levelno for r in caplog.records] == [logging.ERROR]
    message = caplog.records[0].getMessage()
    assert "[UPDATE]" in message
    assert "RuntimeError: boom" in message


def test_routine_steps_are_quiet_below_their_level(caplog):
    log = OperationLogger("tests.store")
    with caplog.at_level(logging.INFO, logger="tests.store"):
        with log.timed_step(StoreStage.STATS, "Counting articles"):
            pass
        log.detail("nothing to see")
    assert caplog.records == []
