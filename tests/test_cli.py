"""Tests for the cmus-notify command line."""

import logging
from unittest.mock import patch

import pytest

from cmusnotify import cli
from cmusnotify.app import RunResult
from cmusnotify.metadata_parser import MalformedLineError
from cmusnotify.protocol import ShortWriteError


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch, tmp_path):
    """Keep the user's config and environment out of CLI runs."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    for name in ("CMUS_NOTIFY_SOCKET", "CMUS_NOTIFY_APP_NAME", "CMUS_NOTIFY_NOTIFIER", "DEBUG", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    yield
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        if handler.get_name() == cli.HANDLER_NAME:
            root_logger.removeHandler(handler)


class TestMain:
    """Test argument handling and exit codes."""

    def test_not_running_prints_notification(self, tmp_path, capsys):
        code = cli.main(["--print", "--socket", str(tmp_path / "missing")])

        assert code == cli.EXIT_OK
        assert capsys.readouterr().out == "C* Music Player\nNot running\n"

    def test_protocol_error_exit_code(self, capsys):
        with patch("cmusnotify.cli.run", side_effect=ShortWriteError(1, 7)):
            code = cli.main(["--print"])

        assert code == cli.EXIT_FAILURE
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Short write" in captured.err

    def test_parse_error_exit_code(self, capsys):
        with patch("cmusnotify.cli.run", side_effect=MalformedLineError("record has no value", 2, "duration")):
            code = cli.main(["--print"])

        assert code == cli.EXIT_FAILURE
        assert "Malformed status response" in capsys.readouterr().err

    def test_missing_config_file(self, tmp_path, capsys):
        code = cli.main(["--config", str(tmp_path / "nope.yaml")])

        assert code == cli.EXIT_CONFIG
        assert "Config file not found" in capsys.readouterr().err

    def test_unknown_notifier_from_config(self, tmp_path, capsys):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("notifier: growl\n", encoding="utf-8")

        assert cli.main(["--config", str(config_file)]) == cli.EXIT_CONFIG
        assert "Unknown notifier" in capsys.readouterr().err

    def test_options_applied_to_config(self):
        with patch("cmusnotify.cli.run", return_value=RunResult.NOTIFIED) as mock_run:
            code = cli.main(["--socket", "/tmp/s", "--notifier", "stdout"])

        assert code == cli.EXIT_OK
        config, notifier = mock_run.call_args[0]
        assert config.socket_path == "/tmp/s"
        assert notifier.name == "stdout"

    def test_print_overrides_notifier(self):
        with patch("cmusnotify.cli.run", return_value=RunResult.NOTIFIED) as mock_run:
            cli.main(["--print", "--notifier", "notify-send"])

        assert mock_run.call_args[0][1].name == "stdout"

    def test_selected_debug_flag_reaches_setup_logging(self):
        with patch("cmusnotify.cli.run", return_value=RunResult.NOTIFIED), patch(
            "cmusnotify.cli.setup_logging"
        ) as mock_setup:
            cli.main(["--print", "--debug-app"])

        assert mock_setup.call_args[0][1] == {"app"}

    def test_debug_flags_registered(self):
        parser = cli.build_parser()
        args = parser.parse_args(["--debug-protocol", "--debug-parser"])

        assert args.debug_subsystem_protocol
        assert args.debug_subsystem_parser
        assert not args.debug_subsystem_cover_art

    def test_help_lists_debug_flags(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            cli.main(["--help"])

        assert exc_info.value.code == 0
        out = capsys.readouterr().out
        for flag in (
            "--debug-protocol",
            "--debug-parser",
            "--debug-cover",
            "--debug-notify",
            "--debug-client",
            "--debug-status",
            "--debug-app",
            "--debug-cli",
        ):
            assert flag in out


class TestDebugLogFilter:
    """Test subsystem filtering of debug records."""

    def make_record(self, name, level):
        return logging.LogRecord(name, level, __file__, 1, "message", None, None)

    def test_allows_non_debug(self):
        log_filter = cli.DebugLogFilter({"parser"})
        assert log_filter.filter(self.make_record("protocol", logging.INFO))

    def test_debug_only_for_selected(self):
        log_filter = cli.DebugLogFilter({"parser"})
        assert log_filter.filter(self.make_record("parser", logging.DEBUG))
        assert not log_filter.filter(self.make_record("protocol", logging.DEBUG))

    def test_no_selection_allows_all(self):
        assert cli.DebugLogFilter().filter(self.make_record("protocol", logging.DEBUG))


class TestSetupLogging:
    """Test root logger configuration."""

    def ours(self):
        return [h for h in logging.getLogger().handlers if h.get_name() == cli.HANDLER_NAME]

    def test_default_level(self):
        cli.setup_logging("WARNING")
        assert logging.getLogger().level == logging.WARNING
        assert len(self.ours()) == 1

    def test_repeated_setup_keeps_one_handler(self):
        cli.setup_logging("INFO")
        cli.setup_logging("INFO")
        assert len(self.ours()) == 1

    def test_subsystem_debug_adds_filter(self):
        cli.setup_logging("WARNING", {"parser"})

        assert logging.getLogger().level == logging.DEBUG
        (handler,) = self.ours()
        (log_filter,) = handler.filters
        assert log_filter.logger_names == {"parser"}

    def test_status_subsystem_filters_on_its_logger_name(self):
        cli.setup_logging("WARNING", {"status", "app"})

        (handler,) = self.ours()
        (log_filter,) = handler.filters
        assert log_filter.logger_names == {"playback_status", "app"}

    def test_debug_shows_everything(self):
        cli.setup_logging("WARNING", {"parser"}, debug=True)

        (handler,) = self.ours()
        assert handler.filters == []
