from pydantic import BaseModel, ConfigDict


class CanonicalModel(BaseModel):
    """Base for the canonical schema handed to the display layer.

    Canonical objects are value objects: frozen after construction and
    rebuilt wholesale on every refresh rather than patched in place.
    """

    model_config = ConfigDict(frozen=True)
