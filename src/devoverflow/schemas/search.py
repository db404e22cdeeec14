"""Global search schemas."""

from pydantic import BaseModel, ConfigDict


class SearchResult(BaseModel):
    """One hit; ``id`` is the question id for answer hits."""

    title: str
    id: str
    type: str

    model_config = ConfigDict(from_attributes=True)
