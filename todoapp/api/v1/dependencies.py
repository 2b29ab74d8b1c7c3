"""
➡️ But : Centraliser les dépendances réutilisables des routes.

get_store() : le TodoStore ouvert UNE fois au démarrage (app.state.store).

get_todo_service() : crée un TodoService autour de ce store.

🔹 Avantages :

Pas de connexion globale : le store est injecté partout par référence.

Facile à remplacer dans les tests (app.dependency_overrides).
"""

from fastapi import Depends, Request

from todoapp.db.store import TodoStore
from todoapp.domain.services import TodoService


def get_store(request: Request) -> TodoStore:
    return request.app.state.store


def get_todo_service(store: TodoStore = Depends(get_store)) -> TodoService:
    return TodoService(store)
