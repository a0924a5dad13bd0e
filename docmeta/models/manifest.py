"""Build manifest: the list of generated pages handed over by the docs build."""

from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class DocumentType(str, Enum):
    CONCEPTUAL = "Conceptual"
    REFERENCE = "Reference"


# Manifest type tags → document types we know how to describe
_TYPE_TAGS = {
    "Conceptual": DocumentType.CONCEPTUAL,
    "ManagedReference": DocumentType.REFERENCE,
    "Reference": DocumentType.REFERENCE,
}


def resolve_document_type(tag: str) -> Optional[DocumentType]:
    """Return the :class:`DocumentType` for a manifest *tag*, or *None* if unsupported."""
    return _TYPE_TAGS.get(tag)


class OutputFile(BaseModel):
    relative_path: str = ""


class ManifestItem(BaseModel):
    """One source file and the output files rendered from it."""

    model_config = ConfigDict(populate_by_name=True)

    source_relative_path: str = ""
    document_type: str = Field(default="", alias="type")
    output: Dict[str, OutputFile] = Field(default_factory=dict)


class Manifest(BaseModel):
    source_base_path: str = ""
    files: List[ManifestItem] = Field(default_factory=list)


def load_manifest(path: Union[str, Path]) -> Manifest:
    """Read and validate the JSON manifest at *path*.

    Raises:
        OSError: if the file cannot be read.
        pydantic.ValidationError: if the content is not a valid manifest.
    """
    return Manifest.model_validate_json(Path(path).read_text(encoding="utf-8"))
