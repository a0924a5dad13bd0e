"""Command line entry point: post-process a finished documentation build."""

import argparse
import logging
import os
from typing import List, Optional

from docmeta.config import DEFAULT_DESCRIPTION_LENGTH, VERSION, Settings
from docmeta.logging_config import configure_logging
from docmeta.models.manifest import load_manifest
from docmeta.plugin import get_post_processor

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="docmeta",
        description="Inject description and Open Graph meta tags into generated HTML pages",
    )
    parser.add_argument("output_folder", help="Folder holding the generated site")
    parser.add_argument(
        "--manifest",
        default=None,
        help="Build manifest JSON (default: OUTPUT_FOLDER/manifest.json)",
    )
    parser.add_argument(
        "--length",
        type=int,
        default=DEFAULT_DESCRIPTION_LENGTH,
        help="Maximum description length in characters",
    )
    parser.add_argument("--og-description", action="store_true", help="Also emit og:description")
    parser.add_argument("--og-title", action="store_true", help="Emit og:title from the page title")
    parser.add_argument("--site-name", default=None, help="Value for og:site_name")
    parser.add_argument("--image", default=None, help="URL for og:image")
    parser.add_argument("--theme-color", default=None, help="Value for the theme-color meta tag")
    parser.add_argument(
        "--selector-version",
        choices=["v1", "v2"],
        default="v2",
        help="Page template generation to target",
    )
    parser.add_argument("--workers", type=int, default=None, help="Number of worker threads")
    parser.add_argument("--verbose", action="store_true", help="Log every processed file")
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging("DEBUG" if args.verbose else "INFO")

    settings = Settings(
        description_length=args.length,
        og_description=args.og_description,
        og_title=args.og_title,
        site_name=args.site_name,
        image_url=args.image,
        theme_color=args.theme_color,
        selector_version=args.selector_version,
        max_workers=args.workers,
    )
    manifest_path = args.manifest or os.path.join(args.output_folder, "manifest.json")
    manifest = load_manifest(manifest_path)

    processor = get_post_processor("DescriptionPostProcessor", settings=settings)
    processor.process(manifest, args.output_folder)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
