"""Tests for loguru sink setup"""

import sys

from sortkit.core.config import Config
from sortkit.core.log import configure_logging


def test_configure_logging_stderr_only(mocker):
    mock_logger = mocker.patch("sortkit.core.log.logger")

    configure_logging(Config(log_level="INFO"))

    mock_logger.remove.assert_called_once_with()
    mock_logger.add.assert_called_once_with(sys.stderr, level="INFO")


def test_configure_logging_adds_file_sink(mocker):
    mock_logger = mocker.patch("sortkit.core.log.logger")

    configure_logging(Config(log_level="DEBUG", log_file="logs/sortkit.log"))

    assert mock_logger.add.call_count == 2
    file_call = mock_logger.add.call_args_list[1]
    assert file_call.args == ("logs/sortkit.log",)
    assert file_call.kwargs["rotation"] == "1 day"
    assert file_call.kwargs["retention"] == "30 days"
    assert file_call.kwargs["level"] == "DEBUG"
