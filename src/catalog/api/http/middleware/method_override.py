"""Let HTML forms reach PUT, PATCH and DELETE routes."""

from urllib.parse import parse_qs

from starlette.types import ASGIApp, Receive, Scope, Send

OVERRIDABLE_METHODS = frozenset({"PUT", "PATCH", "DELETE"})


class MethodOverrideMiddleware:
    """Rewrite ``POST ...?_method=PUT`` (or PATCH/DELETE) before routing.

    The override is read from the query string so the multipart body is left
    untouched for the route handler.
    """

    def __init__(self, app: ASGIApp, param: str = "_method") -> None:
        self.app = app
        self.param = param

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "http" and scope["method"] == "POST":
            query = parse_qs(scope.get("query_string", b"").decode("latin-1"))
            requested = query.get(self.param, [""])[0].upper()
            if requested in OVERRIDABLE_METHODS:
                scope = dict(scope, method=requested)
        await self.app(scope, receive, send)
