"""
Rookies API - Application Entry Point

This is the main FastAPI application for managing rookie records.
It follows the MVC (Model-View-Controller) architectural pattern.

Architecture Overview:
=====================
- Models (app/models/): entities, schemas, validation state, action results
- Views (app/views/): render action results as HTTP responses
- Controllers (app/controllers/): request handling
  - rookies.py: CRUD operations for rookie records
- Services (app/services/): data access
  - person_service.py: PersonService interface and in-memory store

Request Flow:
============
1. Request arrives at a router endpoint
2. Submitted forms are validated into a Person and a ModelState
3. The controller checks the ModelState and calls the PersonService
4. The controller returns an action result (view, redirect, not found)
5. The view layer turns the result into a response
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import get_settings
from app.controllers import rookies_router

settings = get_settings()

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(
    title=settings.app_name,
    description="""
    Manage the list of rookies.

    ## Features
    - List, view, create, edit and delete rookie records
    - Form validation with per-field error reporting

    ## Architecture
    This API follows the MVC pattern:
    - **Models**: dataclass entities + Pydantic schemas
    - **Views**: action results rendered as JSON or redirects
    - **Controllers**: controller classes bound to FastAPI routers
    """,
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(rookies_router)   # /rookies endpoints


# ============================================
# Health Check Endpoints
# ============================================

@app.get("/", tags=["health"])
def root():
    """Basic health check endpoint."""
    return {
        "status": "healthy",
        "service": settings.app_name,
        "version": "1.0.0"
    }


@app.get("/health", tags=["health"])
def health_check():
    """
    Detailed health check endpoint.

    The store is in-memory, so it is always reachable once the app is up.
    """
    return {
        "status": "healthy",
        "store": "in_memory",
    }
