"""
Query Key Normalization Middleware

Calculator clients send parameter names in any casing (Weight=70,
hipcircumference=100). Known keys are rewritten to their canonical
spelling before routing; unknown keys pass through untouched.
"""
from typing import Iterable
from urllib.parse import parse_qsl, urlencode

from starlette.types import ASGIApp, Receive, Scope, Send


class QueryKeyNormalizationMiddleware:
    """Rewrites query keys case-insensitively to the names the routes declare."""

    def __init__(self, app: ASGIApp, canonical_keys: Iterable[str]):
        self.app = app
        self.canonical = {key.lower(): key for key in canonical_keys}

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "http" and scope.get("query_string"):
            scope = dict(scope)
            scope["query_string"] = self.normalize(scope["query_string"])
        await self.app(scope, receive, send)

    def normalize(self, query_string: bytes) -> bytes:
        pairs = parse_qsl(query_string.decode("latin-1"), keep_blank_values=True)
        rewritten = [(self.canonical.get(key.lower(), key), value) for key, value in pairs]
        return urlencode(rewritten).encode("latin-1")
