from pathlib import Path
from typing import Any, Dict, List

import yaml

from todoapp.core.log import get_logger
from todoapp.db.store import TodoStore
from todoapp.domain.schemas import TodoItem

logger = get_logger(__name__)


# -----------------------------
# YAML loader
# -----------------------------
def load_seed_yaml(seed_path: str | Path) -> Dict[str, Any]:
    path = Path(seed_path)
    if not path.exists():
        raise FileNotFoundError(f"Seed YAML introuvable: {path}")

    data = yaml.safe_load(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError("Le YAML de seed doit contenir un objet racine (mapping).")
    return data


# -----------------------------
# Todos
# -----------------------------
def seed_todos(store: TodoStore, data: Dict[str, Any]) -> int:
    """
    Insère les todos de la clé `todos:` si le store est vide.
    Renvoie le nombre de todos insérés (0 si le store contenait déjà des données).
    """
    todos_yaml: List[Dict[str, Any]] = data.get("todos", [])
    items = [
        TodoItem(
            name=t["name"],
            notes=t.get("notes", ""),
            done=bool(t.get("done", False)),
        )
        for t in todos_yaml
    ]
    inserted = store.insert_all_if_empty(items)
    if inserted == 0 and items:
        logger.info("Seed ignoré : le store contient déjà des todos.")
    return inserted
