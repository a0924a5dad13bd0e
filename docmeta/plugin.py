"""Post-processor registration.

A docs build looks post-processors up by name and calls ``prepare_metadata``
once before the build and ``process`` once after every page is rendered.
"""

from typing import Any, Callable, Dict, Mapping, Optional, Protocol, TypeVar

from docmeta.config import Settings
from docmeta.models.manifest import Manifest
from docmeta.services.processor import process_manifest


class PostProcessor(Protocol):
    def prepare_metadata(self, metadata: Mapping[str, Any]) -> Mapping[str, Any]: ...

    def process(self, manifest: Manifest, output_folder: str) -> Manifest: ...


_REGISTRY: Dict[str, Callable[..., PostProcessor]] = {}

T = TypeVar("T")


def register(name: str) -> Callable[[T], T]:
    """Class decorator that makes a post-processor available under *name*."""

    def decorator(factory: T) -> T:
        _REGISTRY[name] = factory
        return factory

    return decorator


def get_post_processor(name: str, **kwargs: Any) -> PostProcessor:
    """Instantiate the post-processor registered as *name*.

    Raises:
        KeyError: if nothing is registered under *name*.
    """
    try:
        factory = _REGISTRY[name]
    except KeyError:
        raise KeyError(f"No post-processor registered as '{name}'.") from None
    return factory(**kwargs)


@register("DescriptionPostProcessor")
class DescriptionPostProcessor:
    """Adds description and Open Graph meta tags to conceptual and API pages."""

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self.settings = settings or Settings()
        self.processed_files = 0

    def prepare_metadata(self, metadata: Mapping[str, Any]) -> Mapping[str, Any]:
        return metadata

    def process(self, manifest: Manifest, output_folder: str) -> Manifest:
        self.processed_files = process_manifest(manifest, output_folder, self.settings)
        return manifest
