"""
Tests pour Settings (pydantic-settings).
"""

from pathlib import Path

from filmcatalog.config import Settings


class TestSettings:
    """Tests pour les valeurs par defaut et les surcharges d'environnement."""

    def test_defaults(self, monkeypatch):
        for name in ("DATABASE_URL", "PORT", "AUTH_TOKENS", "TLS_KEYFILE", "TLS_CERTFILE"):
            monkeypatch.delenv(f"FILMCATALOG_{name}", raising=False)

        settings = Settings()

        assert settings.database_url == "sqlite+aiosqlite:///filmcatalog.db"
        assert settings.port == 3000
        assert settings.auth_tokens == {}
        assert settings.tls_enabled is False

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("FILMCATALOG_PORT", "8443")
        monkeypatch.setenv("FILMCATALOG_AUTH_TOKENS", '{"geheim": ["admin", "user"]}')

        settings = Settings()

        assert settings.port == 8443
        assert settings.auth_tokens == {"geheim": ["admin", "user"]}

    def test_tls_enabled_with_key_and_certificate(self, tmp_path: Path):
        settings = Settings(
            tls_keyfile=tmp_path / "key.pem",
            tls_certfile=tmp_path / "certificate.crt",
        )
        assert settings.tls_enabled is True

    def test_tls_needs_both_files(self, tmp_path: Path):
        settings = Settings(tls_keyfile=tmp_path / "key.pem")
        assert settings.tls_enabled is False

    def test_paths_are_expanded(self):
        settings = Settings(log_file="~/logs/filmcatalog.log")
        assert settings.log_file == Path.home() / "logs" / "filmcatalog.log"
