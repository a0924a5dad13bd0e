from typing import Optional

from pydantic import BaseModel, Field

from docmeta.config import Settings


class DescribeRequest(BaseModel):
    html: str = Field(description="Full HTML document of one generated page.")
    document_type: str = Field(
        default="Conceptual",
        description="Manifest type tag, e.g. 'Conceptual' or 'ManagedReference'.",
    )
    settings: Optional[Settings] = None
