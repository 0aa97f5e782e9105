"""Render, redirect and not-found outcomes shared by the HTML-style actions.

Templates are rendered by the front end; an action answers with the view name
and the data the template needs.
"""

from __future__ import annotations

from typing import Any, NoReturn

from fastapi import HTTPException, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse, RedirectResponse


def render(view: str, data: dict[str, Any]) -> JSONResponse:
    """Return the data for ``view``."""
    return JSONResponse({"view": view, "data": jsonable_encoder(data)})


def redirect(path: str) -> RedirectResponse:
    """Send the browser to ``path``."""
    return RedirectResponse(path, status_code=status.HTTP_302_FOUND)


def not_found(detail: str = "Not found") -> NoReturn:
    """Stop the current action with a 404 response."""
    raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=detail)
