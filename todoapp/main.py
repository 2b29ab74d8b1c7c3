"""
➡️ But : assembler toutes les pièces du puzzle.

Crée l’instance FastAPI (app).

Ouvre le TodoStore UNE fois au démarrage (app.state.store) et le ferme à l'arrêt.

Convertit les erreurs de stockage en réponses HTTP (503 / 409).

Point unique d’exécution : uvicorn todoapp.main:app --reload.
"""

from pathlib import Path
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from todoapp.api.v1.routers import todos
from todoapp.core.config import settings
from todoapp.core.errors import ConstraintViolation, StorageUnavailable
from todoapp.core.log import get_logger
from todoapp.core.openapi import custom_openapi
from todoapp.db.seed import load_seed_yaml, seed_todos
from todoapp.db.store import TodoStore

logger = get_logger(__name__)


def open_store() -> TodoStore:
    """Ouvre le store décrit par la configuration (et applique le seed si SEED_PATH)."""
    db_path = Path(settings.DATABASE_PATH)
    store = TodoStore.open(db_path.parent, db_path.name, echo=settings.sql_echo)
    if settings.SEED_PATH:
        inserted = seed_todos(store, load_seed_yaml(settings.SEED_PATH))
        logger.info("Seed appliqué : %d todo(s) inséré(s)", inserted)
    return store


def create_app(store: Optional[TodoStore] = None) -> FastAPI:
    """
    store : store déjà ouvert (tests). Sinon il est ouvert au démarrage
    depuis la configuration, et fermé à l'arrêt.
    """
    app = FastAPI(
        title=settings.APP_NAME,
        version="0.1.0",
        openapi_tags=[
            {"name": "todos", "description": "Opérations sur la liste de todos"},
        ],
    )
    app.state.store = store

    # CORS (ajustez selon vos besoins)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"], allow_credentials=True,
        allow_methods=["*"], allow_headers=["*"],
    )

    # Routers
    app.include_router(todos.router, prefix="/api/v1")

    app.openapi = lambda: custom_openapi(app)

    @app.exception_handler(StorageUnavailable)
    def storage_unavailable_handler(request: Request, exc: StorageUnavailable):
        return JSONResponse(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, content={"detail": str(exc)})

    @app.exception_handler(ConstraintViolation)
    def constraint_violation_handler(request: Request, exc: ConstraintViolation):
        return JSONResponse(status_code=status.HTTP_409_CONFLICT, content={"detail": str(exc)})

    # Démarrage / arrêt
    @app.on_event("startup")
    def on_startup():
        if app.state.store is None:
            app.state.store = open_store()

    @app.on_event("shutdown")
    def on_shutdown():
        if app.state.store is not None:
            app.state.store.close()

    return app


app = create_app()

if __name__ == "__main__":
    uvicorn.run(app, host="127.0.0.1", port=8080)  # http://localhost:8080
