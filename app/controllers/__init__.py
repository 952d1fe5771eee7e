"""
Controllers Package - The 'C' in MVC

Controllers handle HTTP requests and coordinate between:
- Models (entities, schemas, validation state)
- Services (data access)
- Views (response rendering)

Each controller module exposes a plain controller class holding the
request-handling logic and a FastAPI APIRouter binding it to HTTP.
"""

from app.controllers.rookies import RookiesController, router as rookies_router

__all__ = ["RookiesController", "rookies_router"]
