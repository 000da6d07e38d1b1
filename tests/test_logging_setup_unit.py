import logging

import pytest

from util.logging_setup import setup_logging


@pytest.fixture(autouse=True)
def restore_root_handlers():
    root = logging.getLogger()
    saved = list(root.handlers), root.level
    yield
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    for handler in saved[0]:
        root.addHandler(handler)
    root.setLevel(saved[1])
    logging.captureWarnings(False)


def test_logs_go_to_file(tmp_path):
    log_file = tmp_path / "state" / "tasktree.log"
    assert setup_logging(log_file) is True
    logging.getLogger("tasktree.store").info("Task store ready db=%s", "x.db")
    for handler in logging.getLogger().handlers:
        handler.flush()
    text = log_file.read_text(encoding="utf-8")
    assert "INFO tasktree.store: Task store ready db=x.db" in text


def test_single_handler_after_repeated_setup(tmp_path):
    setup_logging(tmp_path / "a.log")
    setup_logging(tmp_path / "b.log")
    assert len(logging.getLogger().handlers) == 1


def test_unwritable_log_path_does_not_raise(tmp_path):
    blocker = tmp_path / "file"
    blocker.write_text("", encoding="utf-8")
    assert setup_logging(blocker / "sub" / "x.log") is False
