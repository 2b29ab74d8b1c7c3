"""
➡️ But : Accès CRUD thread-safe à la table TodoItem, via UNE seule connexion SQLite.

TodoStore.open(directory) : crée le dossier et le fichier si besoin, prépare le schéma.

Chaque opération (list_all, list_pending, get, save, delete...) prend le verrou
du store AVANT de toucher la connexion et le relâche à la sortie, erreur comprise.
Les opérations sont donc sérialisées : au plus une requête en cours par store.

Deux états seulement : disponible / indisponible. Après une StorageUnavailable
(ou close()), tout appel lève StorageUnavailable ; il faut rouvrir un store.

🔹 "Introuvable" n'est pas une erreur : get() → None, update()/delete() → 0.
"""

import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Union

from sqlalchemy import or_
from sqlalchemy.engine import Engine
from sqlalchemy.exc import DBAPIError, IntegrityError
from sqlmodel import Session, func, select

from todoapp.core.config import DB_FILENAME
from todoapp.core.errors import ConstraintViolation, StorageUnavailable
from todoapp.core.log import get_logger
from todoapp.db.models.todo_items import TodoItemRow
from todoapp.db.session import build_engine, ensure_schema
from todoapp.domain.schemas import TodoItem

logger = get_logger(__name__)


class TodoStore:
    def __init__(self, engine: Engine, path: Path):
        self.engine = engine
        self.path = path
        self._lock = threading.Lock()
        self._available = True

    # ---------- OPEN / CLOSE ----------

    @classmethod
    def open(
        cls,
        directory: Union[str, Path],
        filename: str = DB_FILENAME,
        *,
        echo: bool = False,
    ) -> "TodoStore":
        """
        Ouvre (ou crée) `directory/filename` et garantit le schéma.
        Lève StorageUnavailable si le dossier ou le fichier est inaccessible.
        """
        path = Path(directory) / filename
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            logger.error("Dossier de données inaccessible %s : %s", path.parent, exc)
            raise StorageUnavailable(f"Cannot create data directory {path.parent}: {exc}") from exc

        engine = build_engine(path, echo=echo)
        try:
            ensure_schema(engine)
        except DBAPIError as exc:
            engine.dispose()
            logger.error("Ouverture impossible de %s : %s", path, exc)
            raise StorageUnavailable(f"Cannot open database {path}: {exc.orig}") from exc

        logger.info("Store ouvert : %s", path)
        return cls(engine, path)

    def close(self) -> None:
        with self._lock:
            if not self._available:
                return
            self._available = False
            self.engine.dispose()
        logger.info("Store fermé : %s", self.path)

    @property
    def is_available(self) -> bool:
        return self._available

    def __enter__(self) -> "TodoStore":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # ---------- Section critique ----------

    @contextmanager
    def _session(self) -> Iterator[Session]:
        """
        Session ORM sur la connexion unique, sous verrou.
        Une exception dans le bloc annule la transaction (aucune écriture partielle).
        """
        with self._lock:
            if not self._available:
                raise StorageUnavailable(f"Store {self.path} is unavailable, reopen it")
            try:
                with Session(self.engine) as session:
                    yield session
            except IntegrityError as exc:
                raise ConstraintViolation(str(exc.orig)) from exc
            except DBAPIError as exc:
                self._available = False
                self.engine.dispose()
                logger.error("Connexion perdue sur %s : %s", self.path, exc)
                raise StorageUnavailable(f"Storage error on {self.path}: {exc.orig}") from exc

    # ---------- READ ----------

    def list_all(self) -> List[TodoItem]:
        """Tous les items, triés par id."""
        with self._session() as session:
            rows = session.exec(select(TodoItemRow).order_by(TodoItemRow.id)).all()
            return [TodoItem.model_validate(r) for r in rows]

    def list_pending(self) -> List[TodoItem]:
        """Items avec done == False, triés par id."""
        statement = (
            select(TodoItemRow)
            # NULL : ancienne ligne sans valeur, lue comme done=False
            .where(or_(TodoItemRow.done == False, TodoItemRow.done == None))  # noqa: E711,E712
            .order_by(TodoItemRow.id)
        )
        with self._session() as session:
            rows = session.exec(statement).all()
            return [TodoItem.model_validate(r) for r in rows]

    def get(self, item_id: int) -> Optional[TodoItem]:
        with self._session() as session:
            row = session.get(TodoItemRow, item_id)
            return TodoItem.model_validate(row) if row else None

    def count(self) -> int:
        with self._session() as session:
            return session.exec(select(func.count(TodoItemRow.id))).one()

    # ---------- WRITE ----------

    def save(self, item: TodoItem) -> int:
        """
        id == 0 → insertion, renvoie le nouvel id.
        Sinon → mise à jour de la ligne, renvoie item.id même si elle n'existe plus
        (utiliser update() pour savoir combien de lignes ont été touchées).
        """
        if not item.id:
            return self.insert(item)
        if self.update(item) == 0:
            logger.warning("save() : aucune ligne avec id=%s, rien n'a été mis à jour", item.id)
        return item.id

    def insert(self, item: TodoItem) -> int:
        """Insère toujours une nouvelle ligne (item.id ignoré)."""
        with self._session() as session:
            row = TodoItemRow(name=item.name, notes=item.notes, done=item.done)
            session.add(row)
            session.commit()
            session.refresh(row)
            return row.id

    def update(self, item: TodoItem) -> int:
        """Réécrit tous les champs de la ligne item.id. Renvoie 1, ou 0 si elle n'existe pas."""
        with self._session() as session:
            row = session.get(TodoItemRow, item.id)
            if row is None:
                return 0
            row.name = item.name
            row.notes = item.notes
            row.done = item.done
            session.add(row)
            session.commit()
            return 1

    def delete(self, item_id: int) -> int:
        """Supprime la ligne. Renvoie 1, ou 0 si elle n'existait pas."""
        with self._session() as session:
            row = session.get(TodoItemRow, item_id)
            if row is None:
                return 0
            session.delete(row)
            session.commit()
            return 1

    def insert_all_if_empty(self, items: Iterable[TodoItem]) -> int:
        """
        Insère `items` en une seule transaction, uniquement si la table est vide.
        Test et insertions sous le même verrou : deux appels concurrents n'insèrent qu'une fois.
        Renvoie le nombre de lignes insérées.
        """
        with self._session() as session:
            if session.exec(select(func.count(TodoItemRow.id))).one() > 0:
                return 0
            rows = [TodoItemRow(name=i.name, notes=i.notes, done=i.done) for i in items]
            session.add_all(rows)
            session.commit()
            return len(rows)
