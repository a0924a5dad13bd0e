from typing import List, Optional

from pydantic import BaseModel


class MetaTag(BaseModel):
    attribute: str
    value: str
    content: str


class DescribeResponse(BaseModel):
    excerpt: Optional[str] = None
    description: Optional[str] = None
    meta: List[MetaTag]
    html: str
    """The page with the meta tags injected into its head."""
