import logging

import pytest

from fieldseal.config.loader import ConfigError
from fieldseal.config.log_setup import PACKAGE_LOGGER, setup_logging


@pytest.fixture(autouse=True)
def reset_package_logger():
    yield
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True


@pytest.mark.unit
def test_console_handler_by_default():
    package_logger = setup_logging({})

    assert package_logger.name == "fieldseal"
    assert package_logger.level == logging.INFO
    assert len(package_logger.handlers) == 1
    assert isinstance(package_logger.handlers[0], logging.StreamHandler)


@pytest.mark.unit
def test_file_handler_creates_parent_directory(tmp_path):
    log_file = tmp_path / "logs" / "fieldseal.log"
    package_logger = setup_logging({
        "logging": {"level": "DEBUG", "console": False, "file": str(log_file)}
    })

    assert package_logger.level == logging.DEBUG
    assert [type(h) for h in package_logger.handlers] == [logging.FileHandler]

    logging.getLogger("fieldseal.crypto.compressor").debug("written to file")
    package_logger.handlers[0].flush()
    assert "written to file" in log_file.read_text()


@pytest.mark.unit
def test_repeated_setup_replaces_handlers():
    setup_logging({})
    package_logger = setup_logging({"logging": {"level": "WARNING"}})

    assert len(package_logger.handlers) == 1
    assert package_logger.level == logging.WARNING


@pytest.mark.unit
def test_unwritable_log_file_raises(tmp_path):
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("")
    with pytest.raises(ConfigError, match="Could not create log file"):
        setup_logging({"logging": {"console": False, "file": str(blocker / "x.log")}})


@pytest.mark.unit
def test_package_handlers_stop_propagation():
    package_logger = setup_logging({})
    assert package_logger.propagate is False


@pytest.mark.unit
def test_without_handlers_records_reach_the_host():
    package_logger = setup_logging({"logging": {"console": False}})

    assert package_logger.handlers == []
    assert package_logger.propagate is True
