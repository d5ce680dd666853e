"""
HTML views for the greeting pages and the GraphiQL explorer
"""

from html import escape

from .models import Message

APP_TITLE = "peoplegraph"

GRAPHIQL_VERSION = "0.11.11"


def layout(content: str) -> str:
    return (
        "<!DOCTYPE html>"
        "<html>"
        "<head>"
        f"<title>{APP_TITLE}</title>"
        '<link rel="stylesheet" type="text/css" href="/main.css">'
        "</head>"
        f"<body>{content}</body>"
        "</html>"
    )


def partial() -> str:
    return f"<h1>{APP_TITLE}</h1>"


def index(model: Message) -> str:
    """Render the greeting page; the message text is HTML-escaped."""
    return layout(partial() + f"<p>{escape(model.text)}</p>")


def greeting(name: str) -> Message:
    return Message(text=f"Hello {name}, from FastAPI!")


def graphiql() -> str:
    """Render the GraphiQL page.

    GraphiQL and React come from unpkg; /graphiql.js holds the fetcher that
    posts to the GraphQL route.
    """
    return (
        "<!DOCTYPE html>"
        "<html>"
        "<head>"
        f'<link rel="stylesheet" type="text/css" href="//unpkg.com/graphiql@{GRAPHIQL_VERSION}/graphiql.css">'
        '<link rel="stylesheet" type="text/css" href="/graphiql.css">'
        "</head>"
        "<body>"
        '<div id="app"></div>'
        '<script src="https://unpkg.com/react@16/umd/react.development.js"></script>'
        '<script src="https://unpkg.com/react-dom@16/umd/react-dom.development.js"></script>'
        f'<script src="//unpkg.com/graphiql@{GRAPHIQL_VERSION}/graphiql.js"></script>'
        '<script src="/graphiql.js"></script>'
        "</body>"
        "</html>"
    )
