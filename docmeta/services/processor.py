"""Batch post-processing: inject description and Open Graph tags into every output page."""

import logging
import os
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Iterator, NamedTuple, Optional

from docmeta.config import VERSION, Settings
from docmeta.models.manifest import DocumentType, Manifest, resolve_document_type
from docmeta.services.describer import derive_description
from docmeta.services.excerpt import extract_excerpt, extract_title, get_selector_set
from docmeta.services.injector import build_entries, inject, parse_page, render_page

logger = logging.getLogger(__name__)


class OutputTask(NamedTuple):
    source_path: Path
    output_path: Path
    document_type: DocumentType


def iter_output_files(manifest: Manifest, output_folder: str) -> Iterator[OutputTask]:
    """Yield one :class:`OutputTask` per output file that can be described.

    Items without a source path, outputs without a relative path, and
    document types we do not handle are skipped without error.  Outputs that
    resolve outside *output_folder* are skipped with a warning.
    """
    root = Path(output_folder).resolve()
    for item in manifest.files:
        if not item.source_relative_path:
            continue
        document_type = resolve_document_type(item.document_type)
        logger.debug(
            "Document type for %s is %s.", item.source_relative_path, item.document_type
        )
        if document_type is None:
            continue
        for output in item.output.values():
            if not output.relative_path:
                continue
            output_path = Path(output_folder) / output.relative_path
            if not output_path.resolve().is_relative_to(root):
                logger.warning("Skipping %s – outside of %s", output.relative_path, output_folder)
                continue
            yield OutputTask(
                source_path=Path(manifest.source_base_path) / item.source_relative_path,
                output_path=output_path,
                document_type=document_type,
            )


def process_file(task: OutputTask, settings: Settings) -> bool:
    """Describe a single output page and rewrite it in place.

    Returns:
        True when at least one meta tag was written to the file.  Pages with
        nothing to inject are left untouched.
    """
    logger.debug("Processing metadata from %s to %s...", task.source_path, task.output_path)
    selectors = get_selector_set(settings.selector_version)
    soup = parse_page(task.output_path.read_text(encoding="utf-8"))

    excerpt = extract_excerpt(soup, task.document_type, selectors)
    description = derive_description(excerpt, settings.description_length) if excerpt else None
    if description is None:
        logger.debug("No excerpt found in %s", task.output_path)
    title = extract_title(soup, selectors) if settings.og_title else None

    entries = build_entries(description, title, settings)
    if not entries:
        return False

    inject(soup, entries)
    task.output_path.write_text(render_page(soup), encoding="utf-8")
    return True


def _run_task(task: OutputTask, settings: Settings) -> int:
    """Process one file in a worker thread; failures are logged, never raised."""
    try:
        return int(process_file(task, settings))
    except Exception as exc:
        logger.warning("Skipping %s – %s", task.output_path, exc)
        return 0


def process_manifest(
    manifest: Manifest,
    output_folder: str,
    settings: Optional[Settings] = None,
) -> int:
    """Inject meta tags into every describable output file of *manifest*.

    Every file is processed independently on a thread pool.  Each task reports
    0 or 1 and the results are summed once all tasks have finished.

    Returns:
        The number of output files that received at least one meta tag.

    Raises:
        ValueError: if *output_folder* is not a directory or the configured
            selector version is unknown.
    """
    settings = settings or Settings()
    logger.info("Version: %s", VERSION)
    if not os.path.isdir(output_folder):
        raise ValueError(f"Output folder '{output_folder}' does not exist.")
    get_selector_set(settings.selector_version)

    tasks = list(iter_output_files(manifest, output_folder))
    with ThreadPoolExecutor(max_workers=settings.max_workers) as executor:
        futures = [executor.submit(_run_task, task, settings) for task in tasks]
        processed = sum(future.result() for future in futures)

    logger.info("Added meta tags to %d items.", processed)
    return processed
