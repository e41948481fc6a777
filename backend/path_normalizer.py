"""
Mount-prefix path normalization for the serverless entry point

Requests rewritten to the serverless function keep their public path (/users/42)
while every backend route is declared under /api. The middleware adds the
prefix before handing the request to the application.
"""
from typing import Optional

API_PREFIX = "/api"


def normalize_path(path: Optional[str], prefix: str = API_PREFIX) -> str:
    """
    Return `path` nested under `prefix`.

    /users/42 -> /api/users/42, / -> /api, /api/users -> /api/users
    """
    path = path or "/"
    if not path.startswith("/") or path.startswith(prefix):
        return path
    return prefix + ("" if path == "/" else path)


class MountPrefixMiddleware:
    """
    ASGI wrapper that rewrites scope["path"] in place and delegates to `app`.

    Errors raised by the wrapped application propagate unchanged.
    """

    def __init__(self, app, prefix: str = API_PREFIX):
        self.app = app
        self.prefix = prefix

    async def __call__(self, scope, receive, send):
        if scope["type"] in ("http", "websocket"):
            scope["path"] = normalize_path(scope.get("path"), self.prefix)
            raw_path = scope.get("raw_path")
            if raw_path is not None:
                scope["raw_path"] = normalize_path(
                    raw_path.decode("latin-1"), self.prefix
                ).encode("latin-1")
        await self.app(scope, receive, send)
