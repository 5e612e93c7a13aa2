"""Raw block model."""

from __future__ import annotations

from pydantic import BaseModel


class RawBlock(BaseModel):
    """One KSS comment together with the code that follows it."""

    kss: str
    code: str | None = None
