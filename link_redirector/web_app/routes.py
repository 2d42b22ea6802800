"""Request dispatcher routes.

GET resolves an identifier, POST creates a link. Every other method is
answered with 405 by the handler registered in the app factory.
"""

from typing import Optional

from fastapi import APIRouter, Request, status
from fastapi.responses import Response, PlainTextResponse

from ..common.logging_config import get_logger
from ..errors import LinkRedirectorError

router = APIRouter()

logger = get_logger("web")


@router.get("/{identifier:path}", include_in_schema=False)
async def resolve_link(request: Request, identifier: str):
    """Redirect to the destination stored under the identifier."""
    service = request.app.state.service

    try:
        destination = await service.resolve_link(identifier)
        if destination is None:
            return Response(status_code=status.HTTP_404_NOT_FOUND)

        # Plain Response keeps the destination byte-for-byte (RedirectResponse re-quotes it)
        return Response(
            status_code=status.HTTP_302_FOUND,
            headers={"Location": destination},
        )

    except LinkRedirectorError as e:
        return Response(status_code=e.status_code)
    except Exception:
        logger.exception(f"Error resolving identifier {identifier}")
        return Response(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


def first_query_param(request: Request, name: str) -> Optional[str]:
    """First value of a query parameter, or None when absent."""
    values = request.query_params.getlist(name)
    return values[0] if values else None


@router.post("/{path:path}", include_in_schema=False)
async def create_link(request: Request, path: str):
    """Create a link from the link and secret query parameters.

    A repeated parameter counts by its first occurrence.
    """
    service = request.app.state.service
    link = first_query_param(request, "link")
    secret = first_query_param(request, "secret")

    try:
        identifier = await service.create_link(link=link, secret=secret)
        return PlainTextResponse(identifier, status_code=status.HTTP_201_CREATED)

    except LinkRedirectorError as e:
        return Response(status_code=e.status_code)
    except Exception:
        # Store failures surface as 500; nothing is cleaned up
        logger.exception("Error creating link")
        return Response(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


async def method_not_allowed(request: Request, exc) -> Response:
    """Empty-bodied 405 for any method other than GET and POST."""
    return Response(status_code=status.HTTP_405_METHOD_NOT_ALLOWED)
