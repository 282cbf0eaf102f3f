"""Base model for all domain entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Immutable snapshot of backend data.

    Comments are never edited in place: a refetch replaces them, and thread
    views only hold references to these snapshots.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)
