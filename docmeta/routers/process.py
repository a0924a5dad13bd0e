import asyncio
import logging

from fastapi import APIRouter, HTTPException, Request

from docmeta.config import Settings
from docmeta.models.process_request import ProcessRequest
from docmeta.models.process_response import ProcessResponse
from docmeta.ratelimit import limiter
from docmeta.services.processor import process_manifest

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/process",
    response_model=ProcessResponse,
    summary="Inject meta tags into every page of a build",
    description=(
        "Walks the manifest of a finished documentation build and rewrites each "
        "conceptual and API reference page under `output_folder` with a "
        "`<meta name=\"description\">` tag and any configured Open Graph tags.  "
        "Pages that cannot be processed are skipped and logged."
    ),
)
@limiter.limit("5/minute")
async def process_endpoint(request: Request, body: ProcessRequest) -> ProcessResponse:
    settings = body.settings or Settings()
    logger.info(
        "Process request received",
        extra={"output_folder": body.output_folder, "items": len(body.manifest.files)},
    )

    try:
        processed = await asyncio.to_thread(
            process_manifest, body.manifest, body.output_folder, settings
        )
    except ValueError as exc:
        logger.warning("Rejected process request for %s – %s", body.output_folder, exc)
        raise HTTPException(status_code=400, detail=str(exc))

    return ProcessResponse(processed_files=processed)
