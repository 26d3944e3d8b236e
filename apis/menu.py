from typing import Annotated
from fastapi import APIRouter, Depends, Form, Query, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse
from pymongo.asynchronous.database import AsyncDatabase
from database import get_database
from helpers.menu_links import add_link, delete_link, list_links
from .schemas.menu import CreateMenuLinkForm
from .views import templates

router = APIRouter(prefix="/admin/menu", tags=["menu"])

MENU_ADMIN_URL = "/admin/menu"


@router.get("", response_class=HTMLResponse)
async def list_menu_links(
    request: Request,
    db: AsyncDatabase = Depends(get_database)
):
    """Admin list of all menu links."""
    links = await list_links(db)
    return templates.TemplateResponse(
        request, "menu-list.html", {"title": "Administer menu", "menu": links}
    )


@router.get("/add", response_class=HTMLResponse)
async def add_menu_link_form(
    request: Request,
    db: AsyncDatabase = Depends(get_database)
):
    """Form for adding a menu link."""
    links = await list_links(db)
    return templates.TemplateResponse(
        request, "menu-add.html", {"title": "Add menu link", "menu": links}
    )


@router.post("/add/submit")
async def submit_menu_link(
    form: Annotated[CreateMenuLinkForm, Form()],
    db: AsyncDatabase = Depends(get_database)
) -> RedirectResponse:
    """Store a new menu link and go back to the admin list."""
    await add_link(db, form.to_new_link())

    # 303 so the browser follows up with a GET
    return RedirectResponse(MENU_ADMIN_URL, status_code=status.HTTP_303_SEE_OTHER)


@router.get("/delete")
async def delete_menu_link(
    link_id: str = Query(..., alias="linkId"),
    db: AsyncDatabase = Depends(get_database)
) -> RedirectResponse:
    """Delete a menu link and go back to the admin list."""
    await delete_link(db, link_id)

    return RedirectResponse(MENU_ADMIN_URL, status_code=status.HTTP_302_FOUND)
