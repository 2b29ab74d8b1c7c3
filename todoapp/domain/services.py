"""
➡️ But : Faire le lien entre le store et l'affichage (liste de todos).

TodoService : traduit les résultats "doux" du store (None, 0 ligne) en 404.

Les erreurs de stockage (StorageUnavailable, ConstraintViolation) ne sont pas
interceptées ici : elles remontent telles quelles, main.py les convertit en réponse HTTP.

🔹 Avantages :

Le store reste indépendant du web.

Test unitaire possible sans passer par FastAPI.
"""

from fastapi import HTTPException, status

from todoapp.db.store import TodoStore
from todoapp.domain.schemas import TodoItem


class TodoService:
    def __init__(self, store: TodoStore):
        self.store = store

    def list(self, *, pending_only: bool = False):
        items = self.store.list_pending() if pending_only else self.store.list_all()
        return {"items": items, "total": len(items)}

    def get(self, todo_id: int) -> TodoItem:
        todo = self.store.get(todo_id)
        if not todo:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Todo not found")
        return todo

    def create(self, *, name: str, notes: str = "", done: bool = False) -> TodoItem:
        item = TodoItem(name=name, notes=notes, done=done)
        new_id = self.store.save(item)
        return item.model_copy(update={"id": new_id})

    def update(self, todo_id: int, *, name: str, notes: str, done: bool) -> TodoItem:
        item = TodoItem(id=todo_id, name=name, notes=notes, done=done)
        # update() plutôt que save() : on veut savoir si la ligne existe encore
        if self.store.update(item) == 0:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Todo not found")
        return item

    def delete(self, todo_id: int) -> None:
        if self.store.delete(todo_id) == 0:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Todo not found")
