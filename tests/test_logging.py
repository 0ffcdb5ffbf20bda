import logging

from ruby2js.logutil import get_logger
from ruby2js.version import VersionSlot


def test_logger_is_shared_and_quiet_by_default():
    logger = get_logger()
    assert logger is get_logger()
    assert logger.name == "ruby2js"
    assert logger.handlers


def test_first_publication_logs_once(caplog):
    caplog.set_level(logging.DEBUG, logger="ruby2js")
    slot = VersionSlot()
    slot.initialize(7, 1, 0)
    slot.initialize(7, 1, 0)
    slot.initialize(8, 0, 0)
    slot.read()
    records = [r for r in caplog.records if r.name == "ruby2js"]
    assert len(records) == 1, [r.getMessage() for r in records]
    assert records[0].levelno == logging.DEBUG
    assert "7.1.0" in records[0].getMessage()


def test_host_level_is_preserved(monkeypatch):
    import ruby2js.logutil as logutil

    logger = logging.getLogger("ruby2js")
    monkeypatch.setattr(logutil, "_LOGGER", None)
    monkeypatch.setattr(logger, "level", logging.INFO)
    assert logutil.get_logger().level == logging.INFO
