"""
➡️ But : Configurer l'engine SQLite et préparer le schéma.

build_engine() : UNE seule connexion (StaticPool) partagée par tous les threads ;
la sérialisation des accès est assurée par le verrou du TodoStore.

ensure_schema() : crée la table si besoin, puis ajoute les colonnes manquantes
(ALTER TABLE ... ADD COLUMN). Aucune colonne existante n'est modifiée ni supprimée.
"""

from pathlib import Path
from typing import List

from sqlalchemy import inspect
from sqlalchemy.engine import URL, Engine
from sqlalchemy.pool import StaticPool
from sqlalchemy.schema import CreateColumn
from sqlmodel import SQLModel, create_engine

from todoapp.core.log import get_logger
from todoapp.db.models.todo_items import TABLE_NAME, TodoItemRow

logger = get_logger(__name__)


def build_engine(path: Path, *, echo: bool = False) -> Engine:
    return create_engine(
        # URL construite champ par champ : le chemin reste opaque (?, #, % compris)
        URL.create("sqlite", database=str(path)),
        echo=echo,
        # Requis : la connexion unique est utilisée depuis plusieurs threads
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )


def ensure_schema(engine: Engine) -> List[str]:
    """
    Crée la table TodoItem si elle n'existe pas et ajoute les colonnes
    déclarées par le modèle qui manquent dans une table existante.

    Retourne la liste des colonnes ajoutées.
    """
    table = TodoItemRow.__table__
    SQLModel.metadata.create_all(engine, tables=[table])

    added: List[str] = []
    with engine.begin() as conn:
        # SQLite : noms de colonnes insensibles à la casse
        existing = {c["name"].lower() for c in inspect(conn).get_columns(TABLE_NAME)}
        for column in table.columns:
            if column.name.lower() in existing:
                continue
            ddl = CreateColumn(column).compile(dialect=engine.dialect)
            conn.exec_driver_sql(f'ALTER TABLE "{TABLE_NAME}" ADD COLUMN {ddl}')
            logger.info("Colonne ajoutée : %s.%s", TABLE_NAME, column.name)
            added.append(column.name)
    return added
