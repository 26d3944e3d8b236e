from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from pymongo.asynchronous.database import AsyncDatabase
from database import get_database
from helpers.menu_links import list_links
from .views import templates

router = APIRouter(tags=["pages"])


@router.get("/", response_class=HTMLResponse)
async def home(
    request: Request,
    db: AsyncDatabase = Depends(get_database)
):
    """Home page."""
    links = await list_links(db)
    return templates.TemplateResponse(request, "index.html", {"title": "Home", "menu": links})


@router.get("/about", response_class=HTMLResponse)
async def about(
    request: Request,
    db: AsyncDatabase = Depends(get_database)
):
    """About page."""
    links = await list_links(db)
    return templates.TemplateResponse(request, "about.html", {"title": "About", "menu": links})
