"""Runtime settings shared by the batch processor, the CLI, and the API."""

from typing import Literal, Optional

from pydantic import BaseModel, Field

VERSION = "1.0.0"

# Upper bound for derived description strings, in characters
DEFAULT_DESCRIPTION_LENGTH = 150

SelectorVersion = Literal["v1", "v2"]


class Settings(BaseModel):
    """Knobs that stay fixed for a whole batch."""

    description_length: int = Field(
        default=DEFAULT_DESCRIPTION_LENGTH,
        ge=1,
        description="Maximum character length of the derived description.",
    )
    og_description: bool = Field(
        default=False,
        description="Also emit the description as an og:description property.",
    )
    og_title: bool = Field(
        default=False,
        description="Emit og:title from the page title when one is present.",
    )
    site_name: Optional[str] = None
    image_url: Optional[str] = None
    theme_color: Optional[str] = None
    selector_version: SelectorVersion = "v2"
    max_workers: Optional[int] = Field(
        default=None,
        ge=1,
        description="Thread pool size; None lets the executor pick.",
    )
