import json
from decimal import Decimal
from typing import Any, Callable

from fastapi import Request, Response
from fastapi.routing import APIRoute


def loads_decimal(raw: str | bytes) -> Any:
    """Parse JSON, turning every fractional number into a Decimal instead of a float."""
    return json.loads(raw, parse_float=Decimal)


class DecimalJSONRequest(Request):
    async def json(self) -> Any:
        if not hasattr(self, "_json"):
            self._json = loads_decimal(await self.body())
        return self._json


class DecimalJSONRoute(APIRoute):
    """Route whose JSON request bodies are decoded with ``loads_decimal``."""

    def get_route_handler(self) -> Callable:
        original_route_handler = super().get_route_handler()

        async def custom_route_handler(request: Request) -> Response:
            request = DecimalJSONRequest(request.scope, request.receive)
            return await original_route_handler(request)

        return custom_route_handler
