"""Document generation endpoint.

Single endpoint consumed by the automation workflow that emails/archives
the guest declaration:
- POST: validate the guest registration and return the rendered HTML
- OPTIONS: CORS preflight, empty 200
- any other verb: 405 (raised by the router, rendered in api.exceptions)
"""

import json
from typing import Any

from fastapi import APIRouter, Request, Response
from fastapi.responses import JSONResponse
from starlette.status import HTTP_200_OK

from api.dependencies import get_document_renderer
from api.exceptions import internal_error_response
from shared.models import DocumentError, ErrorResponse, RenderedDocument
from shared.utils.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["documents"])

DOCUMENT_PATH = "/gerar-documento"


async def _read_payload(request: Request) -> dict[str, Any]:
    """Parse the JSON body, treating anything but an object as empty."""
    body = await request.body()
    if not body:
        return {}

    try:
        payload = json.loads(body)
    except ValueError:
        logger.warning("Request body is not valid JSON (%d bytes)", len(body))
        return {}

    return payload if isinstance(payload, dict) else {}


@router.post(
    DOCUMENT_PATH,
    summary="Generate guest responsibility declaration",
    description="""
Render the guest responsibility declaration as a self-contained HTML document.

**Required fields:** `nome`, `cpf`, `email`, `acomodacao`

**Optional fields:** `rg`, `checkin`, `checkout`, `numHospedes` (default "1"),
`telefone`, `assinatura`

**Notes:**
- CPF is reduced to digits and displayed as XXX.XXX.XXX-XX
- Stay length is whole days between check-in and check-out, minimum 1
- Dates are displayed as DD/MM/YYYY
""",
    response_model=RenderedDocument,
    responses={
        400: {"model": ErrorResponse, "description": "Required field missing"},
        500: {"description": "Unexpected rendering failure"},
    },
)
async def generate_document(request: Request) -> Any:
    """Generate the declaration for a guest registration payload."""
    payload = await _read_payload(request)

    try:
        # Renderer construction errors (bad DOCUMENT_TIMEZONE) map to 500 too
        renderer = get_document_renderer()
        document = renderer.generate(payload)
    except DocumentError:
        raise
    except Exception as exc:
        return internal_error_response(exc)

    return JSONResponse(status_code=HTTP_200_OK, content=document.model_dump(mode="json"))


@router.options(DOCUMENT_PATH, include_in_schema=False)
async def preflight() -> Response:
    """CORS preflight: empty 200."""
    return Response(status_code=HTTP_200_OK)

