"""
Configuration de l'application via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le préfixe FILMCATALOG_,
et peut optionnellement être fournie via un fichier .env.

Les jetons d'accès (auth_tokens) associent un jeton Bearer à ses rôles. Sans jeton
configuré, toutes les écritures sont refusées.
"""

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Trouver le fichier .env à la racine du projet (parent de filmcatalog/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Paramètres de l'application avec support des variables d'environnement.

    Tous les paramètres peuvent être surchargés via des variables d'environnement
    avec le préfixe FILMCATALOG_.
    Exemple : FILMCATALOG_LOG_LEVEL=DEBUG
              FILMCATALOG_AUTH_TOKENS='{"geheim": ["admin"]}'

    Les chemins sont automatiquement étendus (~ -> répertoire home).
    """

    model_config = SettingsConfigDict(
        env_prefix="FILMCATALOG_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Base de données (driver async obligatoire : aiosqlite, asyncpg, ...)
    database_url: str = Field(default="sqlite+aiosqlite:///filmcatalog.db")
    database_echo: bool = Field(default=False)

    # Serveur HTTP (TLS actif si certificat et clé sont fournis)
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=3000, ge=1, le=65535)
    tls_keyfile: Optional[Path] = Field(default=None)
    tls_certfile: Optional[Path] = Field(default=None)

    # Jetons Bearer -> rôles ("admin", "user")
    auth_tokens: dict[str, list[str]] = Field(default_factory=dict)

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de rétention)
    log_level: str = Field(default="INFO")
    log_file: Path = Field(default=Path("logs/filmcatalog.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)

    @field_validator("log_file", "tls_keyfile", "tls_certfile", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path | None) -> Path | None:
        """Étend ~ vers le répertoire home dans les chemins."""
        if v is None:
            return None
        return Path(v).expanduser()

    @property
    def tls_enabled(self) -> bool:
        """Vérifie si le certificat et la clé TLS sont configurés."""
        return self.tls_keyfile is not None and self.tls_certfile is not None
