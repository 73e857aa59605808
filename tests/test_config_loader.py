"""Tests for configuration defaults, YAML loading and environment overrides."""

from pathlib import Path

import pytest

from cmusnotify.config import NotifierConfig
from cmusnotify.config_loader import ConfigError, default_config_path, load_config


def write_config(tmp_path: Path, text: str) -> str:
    path = tmp_path / "config.yaml"
    path.write_text(text, encoding="utf-8")
    return str(path)


class TestNotifierConfig:
    """Test configuration defaults."""

    def test_defaults(self):
        config = NotifierConfig.create_default()

        assert config.socket_path is None
        assert config.app_name == "C* Music Player"
        assert config.not_running_message == "Not running"
        assert config.cover_names == ("cover.jpg", "cover.png")
        assert config.notifier is None
        assert config.default_icon == "applications-multimedia"
        assert config.recv_bufsize == 2048
        assert config.log_level == "WARNING"
        assert config.debug is False

    def test_testing_config(self):
        config = NotifierConfig.create_for_testing()
        assert config.notifier == "stdout"
        assert config.log_level == "DEBUG"


class TestLoadConfig:
    """Test YAML loading and overrides."""

    def test_missing_default_file_gives_defaults(self, tmp_path):
        config = load_config(environ={"XDG_CONFIG_HOME": str(tmp_path)})
        assert config == NotifierConfig()

    def test_default_path_under_xdg_config_home(self, tmp_path):
        path = default_config_path({"XDG_CONFIG_HOME": str(tmp_path)})
        assert path == tmp_path / "cmus-notify" / "config.yaml"

    def test_default_file_is_read(self, tmp_path):
        config_dir = tmp_path / "cmus-notify"
        config_dir.mkdir()
        (config_dir / "config.yaml").write_text("app_name: cmus\n", encoding="utf-8")

        config = load_config(environ={"XDG_CONFIG_HOME": str(tmp_path)})
        assert config.app_name == "cmus"

    def test_explicit_file(self, tmp_path):
        path = write_config(
            tmp_path,
            "socket_path: /tmp/cmus.sock\n"
            "notifier: stdout\n"
            "default_icon: audio-x-generic\n"
            "recv_bufsize: 4096\n"
            "cover_names: [folder.jpg, cover.jpg]\n"
            "log_level: info\n"
            "debug: true\n",
        )

        config = load_config(path, environ={})

        assert config.socket_path == "/tmp/cmus.sock"
        assert config.notifier == "stdout"
        assert config.default_icon == "audio-x-generic"
        assert config.recv_bufsize == 4096
        assert config.cover_names == ("folder.jpg", "cover.jpg")
        assert config.log_level == "INFO"
        assert config.debug is True

    def test_empty_file(self, tmp_path):
        assert load_config(write_config(tmp_path, ""), environ={}) == NotifierConfig()

    def test_explicit_file_missing(self, tmp_path):
        with pytest.raises(ConfigError, match="not found"):
            load_config(str(tmp_path / "nope.yaml"), environ={})

    def test_invalid_yaml(self, tmp_path):
        with pytest.raises(ConfigError):
            load_config(write_config(tmp_path, "app_name: [unclosed\n"), environ={})

    def test_top_level_must_be_mapping(self, tmp_path):
        with pytest.raises(ConfigError, match="mapping"):
            load_config(write_config(tmp_path, "- a\n- b\n"), environ={})

    @pytest.mark.parametrize(
        "text",
        [
            "recv_bufsize: 0\n",
            "recv_bufsize: big\n",
            "recv_bufsize: true\n",
            "cover_names: cover.jpg\n",
            "cover_names: ['']\n",
            "app_name: 42\n",
        ],
    )
    def test_invalid_values(self, tmp_path, text):
        with pytest.raises(ConfigError):
            load_config(write_config(tmp_path, text), environ={})

    def test_env_overrides_file(self, tmp_path):
        path = write_config(tmp_path, "socket_path: /from/file\napp_name: file\n")
        environ = {
            "CMUS_NOTIFY_SOCKET": "/from/env",
            "CMUS_NOTIFY_APP_NAME": "env",
            "CMUS_NOTIFY_NOTIFIER": "terminal-notifier",
            "LOG_LEVEL": "debug",
            "DEBUG": "yes",
        }

        config = load_config(path, environ=environ)

        assert config.socket_path == "/from/env"
        assert config.app_name == "env"
        assert config.notifier == "terminal-notifier"
        assert config.log_level == "DEBUG"
        assert config.debug is True

    def test_debug_env_false(self, tmp_path):
        path = write_config(tmp_path, "debug: true\n")
        assert load_config(path, environ={"DEBUG": "no"}).debug is False
