import logging

from fastapi import APIRouter, HTTPException, Request

from docmeta.config import Settings
from docmeta.models.describe_request import DescribeRequest
from docmeta.models.describe_response import DescribeResponse, MetaTag
from docmeta.models.manifest import resolve_document_type
from docmeta.ratelimit import limiter
from docmeta.services.describer import derive_description
from docmeta.services.excerpt import extract_excerpt, extract_title, get_selector_set
from docmeta.services.injector import build_entries, inject, parse_page, render_page

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/describe",
    response_model=DescribeResponse,
    summary="Preview the meta tags for a single page",
    description=(
        "Runs the excerpt → description → injection steps on the submitted HTML "
        "without touching any file, and returns the derived values together "
        "with the rewritten page."
    ),
)
@limiter.limit("30/minute")
async def describe(request: Request, body: DescribeRequest) -> DescribeResponse:
    settings = body.settings or Settings()
    document_type = resolve_document_type(body.document_type)
    if document_type is None:
        raise HTTPException(
            status_code=400,
            detail=f"Unsupported document type '{body.document_type}'.",
        )

    soup = parse_page(body.html)
    selectors = get_selector_set(settings.selector_version)
    excerpt = extract_excerpt(soup, document_type, selectors)
    description = derive_description(excerpt, settings.description_length) if excerpt else None
    title = extract_title(soup, selectors) if settings.og_title else None
    entries = build_entries(description, title, settings)

    html = body.html
    if entries:
        try:
            inject(soup, entries)
        except ValueError as exc:
            logger.warning("Cannot describe submitted page – %s", exc)
            raise HTTPException(status_code=400, detail=str(exc))
        html = render_page(soup)

    return DescribeResponse(
        excerpt=excerpt,
        description=description,
        meta=[MetaTag(**entry._asdict()) for entry in entries],
        html=html,
    )
