import logging
import sys
from unittest.mock import patch, MagicMock
from utils.logging_config import setup_logging


def test_setup_logging_verbosity_0():
    """Test that verbosity 0 disables all logging."""
    with patch('logging.getLogger') as mock_get_logger:
        mock_logger = MagicMock()
        mock_get_logger.return_value = mock_logger

        setup_logging(verbosity=0)

        mock_logger.setLevel.assert_called_once_with(logging.CRITICAL + 1)
        mock_logger.handlers.clear.assert_called_once()
        # No handlers should be added for verbosity 0
        assert mock_logger.addHandler.call_count == 0


def test_setup_logging_verbosity_1():
    """Test that verbosity 1 sets INFO level on a stderr handler."""
    with patch('logging.getLogger') as mock_get_logger, \
         patch('logging.StreamHandler') as mock_stream_handler:
        mock_logger = MagicMock()
        mock_get_logger.return_value = mock_logger
        mock_handler = MagicMock()
        mock_stream_handler.return_value = mock_handler

        setup_logging(verbosity=1)

        mock_stream_handler.assert_called_once_with(sys.stderr)
        mock_logger.setLevel.assert_called_once_with(logging.INFO)
        mock_logger.addHandler.assert_called_once_with(mock_handler)
        mock_handler.setLevel.assert_called_once_with(logging.INFO)


def test_setup_logging_verbosity_2():
    """Test that verbosity >1 sets DEBUG level."""
    with patch('logging.getLogger') as mock_get_logger, \
         patch('logging.StreamHandler') as mock_stream_handler:
        mock_logger = MagicMock()
        mock_get_logger.return_value = mock_logger
        mock_handler = MagicMock()
        mock_stream_handler.return_value = mock_handler

        setup_logging(verbosity=2)

        mock_logger.setLevel.assert_called_once_with(logging.DEBUG)
        mock_handler.setLevel.assert_called_once_with(logging.DEBUG)


def test_setup_logging_file_only_records_info(tmp_path):
    """A log file still receives INFO records when the console is silent."""
    logfile = tmp_path / "logs" / "hashcheck.log"
    try:
        setup_logging(verbosity=0, logfile=str(logfile))
        root = logging.getLogger()
        assert root.level == logging.INFO
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0], logging.FileHandler)

        logging.getLogger("tests").info("hello from test")
        root.handlers[0].flush()
        assert "hello from test" in logfile.read_text(encoding="utf-8")
    finally:
        root = logging.getLogger()
        for handler in list(root.handlers):
            handler.close()
        root.handlers.clear()
