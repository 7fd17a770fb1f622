"""
Route registration keyed on the final path segment.

`/anuncios`, `/api/anuncios` and `/.netlify/functions/api/anuncios/` all
reach the same handler; only the last non-empty segment names the resource.
"""

from __future__ import annotations

from typing import Any, Callable

from fastapi import APIRouter


def resource_paths(resource: str) -> list[str]:
    base = "/" + resource.strip("/")
    return [base, base + "/", "/{prefix:path}" + base, "/{prefix:path}" + base + "/"]


def resource_route(router: APIRouter, method: str, resource: str, **kwargs: Any) -> Callable:
    def decorator(func: Callable) -> Callable:
        paths = resource_paths(resource)
        for path in paths:
            router.add_api_route(
                path,
                func,
                methods=[method],
                # Only the bare path shows up in the OpenAPI schema.
                include_in_schema=path == paths[0],
                **kwargs,
            )
        return func

    return decorator
