"""
➡️ But : Exposer la liste de todos (l'équivalent de la ListView liée aux items).

Chaque ligne affichée ne lit que des champs simples (name, done...) :
aucune mise en forme ici, juste des enregistrements.

Les routes ne contiennent ni SQL ni logique métier.
"""

from fastapi import APIRouter, Depends, Path, Query, status

from todoapp.api.v1.dependencies import get_todo_service
from todoapp.domain.schemas import TodoCreate, TodoOut, TodoUpdate
from todoapp.domain.services import TodoService

router = APIRouter(
    prefix="/todos",
    tags=["todos"],
    responses={404: {"description": "Not Found"}},
)


@router.get(
    "",
    summary="Lister les todos",
    description="Retourne toutes les tâches, ou seulement celles non terminées avec `pending=true`.",
    response_model=dict,  # {"items": list[TodoOut], "total": int}
    responses={
        200: {
            "description": "Liste complète",
            "content": {
                "application/json": {
                    "example": {"items": [{"id": 1, "name": "Learn X", "notes": "Attend Y", "done": True}],
                                "total": 1}
                }
            },
        }
    },
)
def list_todos(
    pending: bool = Query(False, description="Uniquement les todos non terminés"),
    svc: TodoService = Depends(get_todo_service),
):
    data = svc.list(pending_only=pending)
    data["items"] = [TodoOut.model_validate(i) for i in data["items"]]
    return data


@router.post(
    "",
    summary="Créer un todo",
    status_code=status.HTTP_201_CREATED,
    response_model=TodoOut,
)
def create_todo(payload: TodoCreate, svc: TodoService = Depends(get_todo_service)):
    return svc.create(name=payload.name, notes=payload.notes, done=payload.done)


@router.get(
    "/{todo_id}",
    summary="Récupérer un todo",
    response_model=TodoOut,
)
def get_todo(todo_id: int = Path(..., ge=1), svc: TodoService = Depends(get_todo_service)):
    return svc.get(todo_id)


@router.put(
    "/{todo_id}",
    summary="Remplacer un todo",
    response_model=TodoOut,
)
def update_todo(
    payload: TodoUpdate,
    todo_id: int = Path(..., ge=1),
    svc: TodoService = Depends(get_todo_service),
):
    return svc.update(todo_id, name=payload.name, notes=payload.notes, done=payload.done)


@router.delete(
    "/{todo_id}",
    summary="Supprimer un todo",
    status_code=status.HTTP_204_NO_CONTENT,
)
def delete_todo(todo_id: int = Path(..., ge=1), svc: TodoService = Depends(get_todo_service)):
    svc.delete(todo_id)
    return None
