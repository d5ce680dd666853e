"""
HTML page endpoints
"""

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from ... import views

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
async def index() -> str:
    """Greeting page for the world."""
    return views.index(views.greeting("world"))


@router.get("/hello/{name}", response_class=HTMLResponse)
async def hello(name: str) -> str:
    """Greeting page for the given name."""
    return views.index(views.greeting(name))


@router.get("/graphiql", response_class=HTMLResponse)
async def graphiql() -> str:
    """GraphiQL explorer page."""
    return views.graphiql()
