"""Shared pydantic base for immutable run records."""

from pydantic import BaseModel, ConfigDict


class Model(BaseModel):
    """Frozen model that also accepts the plain collaborator classes as fields."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)
