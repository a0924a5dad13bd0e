from pydantic import BaseModel


class ProcessResponse(BaseModel):
    processed_files: int
    """Number of output files that received at least one meta tag."""
