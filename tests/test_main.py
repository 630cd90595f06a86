"""
Tests for main.py - Server entry point
"""

import pytest
from unittest.mock import patch


class TestMain:
    """Tests for main function."""

    def test_runs_server(self):
        import imap_datetime.main as main_module

        with patch.object(main_module.mcp, "run") as mock_run:
            main_module.main()

        mock_run.assert_called_once_with()

    def test_exits_on_error(self):
        import imap_datetime.main as main_module

        with patch.object(main_module.mcp, "run", side_effect=RuntimeError("boom")):
            with pytest.raises(SystemExit) as exc_info:
                main_module.main()

        assert exc_info.value.code == 1
