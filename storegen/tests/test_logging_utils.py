"""
Unit tests for console logging helpers.
"""

from unittest.mock import patch

from storegen.utils.logging_utils import log_error, log_line, log_progress, log_success


@patch("storegen.utils.logging_utils._utc_timestamp", return_value="2024-01-15 10:30:45")
class TestLogging:
    """Test message formats."""

    def test_log_progress(self, _timestamp, capsys):
        log_progress("Configuration", "Using backend myshop:backend")
        assert capsys.readouterr().out == (
            "[2024-01-15 10:30:45] Configuration: Using backend myshop:backend\n"
        )

    def test_log_line(self, _timestamp, capsys):
        log_line("Initializing...")
        assert capsys.readouterr().out == "[2024-01-15 10:30:45] Initializing...\n"

    def test_log_success(self, _timestamp, capsys):
        log_success("10 coupons generated in 0.5 seconds")
        assert capsys.readouterr().out == (
            "[2024-01-15 10:30:45] Success: 10 coupons generated in 0.5 seconds\n"
        )

    def test_log_error_with_exception(self, _timestamp, capsys):
        log_error("Generating terms", ValueError("Parent term 42 does not exist."))
        assert capsys.readouterr().out == (
            "[2024-01-15 10:30:45] Error in Generating terms: Parent term 42 does not exist.\n"
        )
