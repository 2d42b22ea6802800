"""Tests for configuration loading."""

from link_redirector.config import Config, load_config
from link_redirector.app import build_service
from link_redirector.store import MemoryLinkStore


class TestConfig:
    """Test Config."""

    def test_defaults(self, monkeypatch):
        for name in ("SECRET", "STORE_URL", "PORT", "KEY_PREFIX"):
            monkeypatch.delenv(name, raising=False)

        config = Config(_env_file=None)

        assert config.secret is None
        assert config.shared_secret is None
        assert config.store_url == "memory://"
        assert config.port == 8787
        assert config.key_prefix == "links:"

    def test_from_environment(self, monkeypatch):
        monkeypatch.setenv("SECRET", "S1")
        monkeypatch.setenv("STORE_URL", "redis://localhost:6379/1")
        monkeypatch.setenv("PORT", "9000")

        config = load_config()

        assert config.shared_secret == "S1"
        assert config.store_url == "redis://localhost:6379/1"
        assert config.port == 9000

    def test_secret_is_masked(self):
        config = Config(secret="S1")

        assert "S1" not in str(config.model_dump())
        assert "S1" not in repr(config)

    def test_build_service(self, logger):
        service = build_service(Config(secret="S1", store_url="memory://"), logger)

        assert isinstance(service.store, MemoryLinkStore)
        assert service.secret == "S1"
