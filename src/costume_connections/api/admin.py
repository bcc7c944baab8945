"""Admin moderation endpoints.

These routes are not authenticated; anyone who can reach them can edit or
delete any submission.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import APIRouter, Query, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse
from pymongo.errors import PyMongoError

from costume_connections.api.forms import draft_from_form, read_form_data
from costume_connections.api.views import templates

if TYPE_CHECKING:
    from costume_connections.containers import AppContainer

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin", tags=["admin"])

_ADMIN_LIST_URL = "/admin/costumes"


def _back_to_list() -> RedirectResponse:
    return RedirectResponse(_ADMIN_LIST_URL, status_code=status.HTTP_303_SEE_OTHER)


@router.get("/costumes", response_class=HTMLResponse)
async def list_costumes(request: Request) -> HTMLResponse:
    """Render every submission regardless of status."""
    container: AppContainer = request.app.state.container
    costumes = container.costume_service.list_all()
    return templates.TemplateResponse(
        request, "admin/costumes.html", {"title": "Costumes", "costumes": costumes}
    )


@router.get("/costumes/costume", response_class=HTMLResponse, response_model=None)
async def costume_detail(
    request: Request,
    costume_id: str | None = Query(default=None, alias="costumeId"),
) -> HTMLResponse | RedirectResponse:
    """Render a single submission with its contact details."""
    if not costume_id:
        return _back_to_list()
    container: AppContainer = request.app.state.container
    costume = container.costume_service.get_by_id(costume_id)
    return templates.TemplateResponse(
        request,
        "admin/costume.html",
        {"title": "Costume", "costume": costume},
        status_code=status.HTTP_200_OK if costume else status.HTTP_404_NOT_FOUND,
    )


@router.get("/costume/edit", response_class=HTMLResponse, response_model=None)
async def edit_form(
    request: Request,
    costume_id: str | None = Query(default=None, alias="costumeId"),
) -> HTMLResponse | RedirectResponse:
    """Render the edit form pre-filled with the stored submission."""
    if not costume_id:
        return _back_to_list()
    container: AppContainer = request.app.state.container
    costume = container.costume_service.get_by_id(costume_id)
    return templates.TemplateResponse(
        request,
        "admin/edit.html",
        {"title": "Edit costume", "edit_costume": costume},
        status_code=status.HTTP_200_OK if costume else status.HTTP_404_NOT_FOUND,
    )


@router.post("/costume/edit/submit")
async def submit_edit(request: Request) -> RedirectResponse:
    """Overwrite a submission with the posted fields."""
    container: AppContainer = request.app.state.container
    data = await read_form_data(request)
    costume_id = data.get("costumeId", "")
    try:
        container.costume_service.update(costume_id, draft_from_form(data))
    except PyMongoError:
        logger.exception("Failed to update costume", extra={"costume_id": costume_id})
    return _back_to_list()


@router.get("/costume/delete")
async def delete_costume(
    request: Request,
    costume_id: str | None = Query(default=None, alias="costumeId"),
) -> RedirectResponse:
    """Delete a submission and return to the admin list."""
    container: AppContainer = request.app.state.container
    try:
        container.costume_service.delete(costume_id or "")
    except PyMongoError:
        logger.exception("Failed to delete costume", extra={"costume_id": costume_id})
    return _back_to_list()
