"""Field types shared by the workspace YAML models."""

from __future__ import annotations

from datetime import date
from typing import Annotated, Any

from pydantic import BeforeValidator


def scalar_text(value: Any) -> Any:
    """Read a YAML scalar as the text it was written with.

    ``null`` reads as ``""``; booleans, numbers and dates become strings.
    Mappings and sequences pass through so that validation rejects them.
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, (int, float)):
        return str(value)
    return value


ScalarText = Annotated[str, BeforeValidator(scalar_text)]
