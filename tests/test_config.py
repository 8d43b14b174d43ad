"""Unit tests for configuration management."""

from ghfollowers.config import AppConfig, StorageBackend, LogFormat


class TestAppConfigDefaults:
    """Test default configuration values."""

    def test_default_api_base_url(self):
        config = AppConfig()
        assert config.api_base_url == "https://api.github.com"

    def test_default_timeout(self):
        config = AppConfig()
        assert config.request_timeout_seconds == 30.0

    def test_default_storage_backend(self):
        config = AppConfig()
        assert config.storage_backend == StorageBackend.SQLITE

    def test_default_log_format(self):
        config = AppConfig()
        assert config.log_format == LogFormat.CONSOLE

    def test_no_token_by_default(self):
        config = AppConfig()
        assert config.github_token is None


class TestAppConfigEnvVars:
    """Test configuration from environment variables."""

    def test_token_from_env(self, monkeypatch):
        monkeypatch.setenv("GHFOLLOWERS_GITHUB_TOKEN", "abc123")
        config = AppConfig()
        assert config.github_token == "abc123"

    def test_storage_backend_from_env(self, monkeypatch):
        monkeypatch.setenv("GHFOLLOWERS_STORAGE_BACKEND", "memory")
        config = AppConfig()
        assert config.storage_backend == StorageBackend.MEMORY

    def test_log_level_from_env(self, monkeypatch):
        monkeypatch.setenv("GHFOLLOWERS_LOG_LEVEL", "DEBUG")
        config = AppConfig()
        assert config.log_level == "DEBUG"

    def test_timeout_from_env(self, monkeypatch):
        monkeypatch.setenv("GHFOLLOWERS_REQUEST_TIMEOUT_SECONDS", "5.5")
        config = AppConfig()
        assert config.request_timeout_seconds == 5.5

    def test_env_file(self, tmp_path, monkeypatch):
        (tmp_path / ".env").write_text("GHFOLLOWERS_SQLITE_PATH=/tmp/favs.db\n")
        monkeypatch.chdir(tmp_path)
        config = AppConfig()
        assert config.sqlite_path == "/tmp/favs.db"


class TestEnums:
    def test_storage_backends(self):
        assert StorageBackend.SQLITE.value == "sqlite"
        assert StorageBackend.MEMORY.value == "memory"

    def test_log_formats(self):
        assert LogFormat.JSON.value == "json"
        assert LogFormat.CONSOLE.value == "console"
