"""Tests for the portops orchestrator entry point."""

from __future__ import annotations

import os
from unittest.mock import MagicMock, patch

import pytest

from portops import __main__ as entry


class TestMain:
    """Test sub-command dispatch."""

    def test_no_args_prints_usage(self, capsys):
        with patch.object(entry.sys, "argv", ["portops"]):
            with pytest.raises(SystemExit) as exc_info:
                entry.main()

        assert exc_info.value.code == 1
        assert "Available commands" in capsys.readouterr().out

    def test_help_exits_zero(self, capsys):
        with patch.object(entry.sys, "argv", ["portops", "--help"]):
            with pytest.raises(SystemExit) as exc_info:
                entry.main()

        assert exc_info.value.code == 0

    def test_unknown_command(self, capsys):
        with patch.object(entry.sys, "argv", ["portops", "reboot"]):
            with pytest.raises(SystemExit) as exc_info:
                entry.main()

        assert exc_info.value.code == 1
        assert "unknown command 'reboot'" in capsys.readouterr().err

    @pytest.mark.parametrize("command,module_path", [("port", "portops.cli"), ("serve", "portops.api")])
    def test_dispatches_remaining_args(self, command, module_path):
        module = MagicMock()
        with patch.object(entry.sys, "argv", ["portops", command, "10.0.0.1", "list"]), patch(
            "importlib.import_module", return_value=module
        ) as import_module:
            entry.main()

        import_module.assert_called_once_with(module_path)
        module.main.assert_called_once_with(["10.0.0.1", "list"])


    def test_dispatch_leaves_logging_to_sub_cli(self, monkeypatch):
        """The dispatcher itself does not touch the log level."""
        monkeypatch.setenv("LOGURU_LEVEL", "DEBUG")
        with patch.object(entry.sys, "argv", ["portops", "port", "10.0.0.1", "list"]), patch(
            "importlib.import_module", return_value=MagicMock()
        ):
            entry.main()

        assert os.environ["LOGURU_LEVEL"] == "DEBUG"
