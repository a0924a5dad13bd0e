from typing import Optional

from pydantic import BaseModel, Field

from docmeta.config import Settings
from docmeta.models.manifest import Manifest


class ProcessRequest(BaseModel):
    manifest: Manifest
    output_folder: str = Field(
        min_length=1,
        description="Folder the manifest's output paths are relative to.",
    )
    settings: Optional[Settings] = None
