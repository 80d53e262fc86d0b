# app/api/responses.py

from fastapi import status
from fastapi.responses import JSONResponse, RedirectResponse, Response

from app.services.results import ActionResult, Redirect


def to_response(result: ActionResult) -> Response:
    """Redirects become 303 See Other; any other state is rendered as JSON."""
    if isinstance(result, Redirect):
        return RedirectResponse(result.path, status_code=status.HTTP_303_SEE_OTHER)
    return JSONResponse(result.model_dump())
