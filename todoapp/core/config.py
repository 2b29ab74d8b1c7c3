"""
➡️ But : Centraliser tous les paramètres configurables (nom d’app, dossier de données, fichier DB, logs...).

Utilise pydantic-settings pour charger automatiquement les variables d’environnement (.env, variables système…).

Fournit un objet settings unique, que tu importes ailleurs :

from todoapp.core.config import settings
print(settings.DATABASE_PATH)


🔹 Avantages :

Le dossier de données est injecté (DATA_DIR) : le code ne résout jamais lui-même un chemin "plateforme".

Facilite le passage entre environnements (dev / prod / test).
"""

from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings

DB_FILENAME = "TodoSQLite.db3"


class Settings(BaseSettings):
    # -----------------------------
    # App
    # -----------------------------
    APP_NAME: str = "Todo-SQLite"
    ENV: str = "dev"  # dev | prod | test

    # -----------------------------
    # Storage
    # -----------------------------
    DATA_DIR: str = "data"          # dossier privé de l'application
    DB_FILENAME: str = DB_FILENAME
    DATABASE_PATH: Optional[str] = None  # calculé si non fourni

    # -----------------------------
    # Divers
    # -----------------------------
    LOG_LEVEL: str = "INFO"
    SEED_PATH: Optional[str] = None  # YAML appliqué au démarrage si défini

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": True,
    }

    def model_post_init(self, __context):  # appelée automatiquement
        # DATABASE_PATH par défaut depuis DATA_DIR + DB_FILENAME si non fourni
        if not self.DATABASE_PATH:
            object.__setattr__(self, "DATABASE_PATH", str(Path(self.DATA_DIR) / self.DB_FILENAME))
        object.__setattr__(self, "LOG_LEVEL", self.LOG_LEVEL.upper())

    @property
    def sql_echo(self) -> bool:
        # echo seulement en dev pour ne pas polluer les logs en prod
        return self.ENV == "dev"


# Instance globale importable partout
settings = Settings()
