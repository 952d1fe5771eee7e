"""
Views Package - The 'V' in MVC

Controllers return action results; this package renders them.
The API is JSON-only, so a "view" is a JSON document naming the view
and carrying its model and validation errors.
"""

from app.views.responses import render

__all__ = ["render"]
