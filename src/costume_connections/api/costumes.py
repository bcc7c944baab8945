"""Public catalog and submission endpoints."""

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

router = APIRouter(tags=["costumes"])


@router.get("/costumes", response_class=HTMLResponse)
async def list_costumes(request: Request) -> HTMLResponse:
    """Render the catalog of approved costumes."""
    container: AppContainer = request.app.state.container
    costumes = container.costume_service.list_approved()
    return templates.TemplateResponse(
        request, "costumes.html", {"title": "Costumes", "costumes": costumes}
    )


@router.get("/costumes/costume", response_class=HTMLResponse, response_model=None)
async def costume_detail(
    request: Request,
    costume_id: str | None = Query(default=None, alias="costumeId"),
) -> HTMLResponse | RedirectResponse:
    """Render a single costume, or return to the catalog without an id."""
    if not costume_id:
        return RedirectResponse("/costumes", status_code=status.HTTP_303_SEE_OTHER)
    container: AppContainer = request.app.state.container
    costume = container.costume_service.get_by_id(costume_id)
    return templates.TemplateResponse(
        request,
        "costume.html",
        {"title": "Costume", "costume": costume},
        status_code=status.HTTP_200_OK if costume else status.HTTP_404_NOT_FOUND,
    )


@router.get("/sell", response_class=HTMLResponse)
async def sell_form(request: Request) -> HTMLResponse:
    """Render the costume submission form."""
    return templates.TemplateResponse(request, "sell.html", {"title": "Sell"})


@router.post("/sell/submit")
async def submit_costume(request: Request) -> RedirectResponse:
    """Store a public submission and return to the catalog."""
    container: AppContainer = request.app.state.container
    draft = draft_from_form(await read_form_data(request))
    try:
        container.costume_service.submit(draft)
    except PyMongoError:
        logger.exception("Failed to store costume submission")
    return RedirectResponse("/costumes", status_code=status.HTTP_303_SEE_OTHER)
