"""Request model for the *index document* procedure."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class IndexRequest(BaseModel):
    """Identifies the stored file to index and the owner to tag it with.

    Attributes
    ----------
    user_id:
        Owner of the document; selects the ``doc-<userId>`` bucket.
        Serialised as ``userId``.
    name:
        Object key of the document inside the owner's bucket.
    """

    model_config = ConfigDict(populate_by_name=True)

    user_id: str = Field(alias="userId")
    name: str
