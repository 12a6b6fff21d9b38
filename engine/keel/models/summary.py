"""Workspace summary record stored in ``<root>/.workspace``."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from .fields import ScalarText


class Summary(BaseModel):
    """Which application this workspace belongs to."""

    model_config = ConfigDict(extra="ignore")

    application: ScalarText = ""
