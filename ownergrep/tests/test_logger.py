from ownergrep.core.exceptions import IgnoreFileError
from ownergrep.utils.logger import get_logger, log_exception, logger


def test_get_logger_binds_module_name():
    records = []
    handler_id = logger.add(lambda m: records.append(m.record), level="DEBUG")
    try:
        get_logger("ownergrep.tests").info("hello")
    finally:
        logger.remove(handler_id)
    assert records[0]["extra"]["name"] == "ownergrep.tests"
    assert records[0]["message"] == "hello"


def test_log_exception_includes_traceback_and_context():
    records = []
    handler_id = logger.add(lambda m: records.append(m.record), level="DEBUG")
    try:
        try:
            raise IgnoreFileError(".gitignore", reason="No such file or directory")
        except IgnoreFileError as e:
            log_exception(e, {"path": ".gitignore"})
    finally:
        logger.remove(handler_id)
    record = records[0]
    assert record["level"].name == "ERROR"
    assert record["message"].startswith("Exception occurred: IgnoreFileError")
    assert record["exception"] is not None
    assert record["extra"]["path"] == ".gitignore"
