"""
➡️ But : Personnaliser la documentation Swagger/OpenAPI.

custom_openapi(app) complète le schéma généré par FastAPI (titre, description, conventions).
"""

from fastapi.openapi.utils import get_openapi


def custom_openapi(app):
    if app.openapi_schema:
        return app.openapi_schema
    openapi_schema = get_openapi(
        title=app.title,
        version=app.version,
        description=(
            "Liste de todos adossée à un fichier SQLite local.\n\n"
            "### Conventions\n"
            "- Un todo jamais enregistré a `id = 0` ; l'id est attribué à la création.\n"
            "- `GET /todos?pending=true` ne renvoie que les todos non terminés.\n"
            "- 503 si le stockage est indisponible (il faut redémarrer le service).\n"
        ),
        routes=app.routes,
    )
    app.openapi_schema = openapi_schema
    return app.openapi_schema
