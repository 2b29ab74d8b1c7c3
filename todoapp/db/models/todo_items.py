"""
➡️ But : Définir la table TodoItem (ORM).

Colonnes nommées comme dans le fichier d'origine : ID, Name, Notes, Done.

Cette classe reste interne au store : les appelants manipulent des snapshots
(todoapp.domain.schemas.TodoItem), jamais des objets ORM vivants.
"""

from typing import Optional

from sqlalchemy import Boolean, Column, Integer, String, text
from sqlmodel import Field, SQLModel

TABLE_NAME = "TodoItem"


class TodoItemRow(SQLModel, table=True):
    __tablename__ = TABLE_NAME
    # AUTOINCREMENT : un id supprimé n'est jamais réattribué
    __table_args__ = {"sqlite_autoincrement": True}

    id: Optional[int] = Field(
        default=None,
        sa_column=Column("ID", Integer, primary_key=True, autoincrement=True),
    )
    name: str = Field(default="", sa_column=Column("Name", String, nullable=False, server_default=""))
    notes: str = Field(default="", sa_column=Column("Notes", String, nullable=False, server_default=""))
    done: bool = Field(
        default=False,
        sa_column=Column("Done", Boolean, nullable=False, server_default=text("0")),
    )
