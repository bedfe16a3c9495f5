from __future__ import annotations

from typing import Iterable, Optional

from ..core.exceptions import ValidationError


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def normalize_ids(values: Optional[Iterable[object]]) -> list[str]:
    """Strip, drop blanks and de-duplicate ids, keeping first-seen order."""
    if values is None:
        return []
    if not isinstance(values, (list, tuple)):
        raise ValidationError("managerIds must be a list")

    out: list[str] = []
    for v in values:
        s = str(v).strip() if v is not None else ""
        if s and s not in out:
            out.append(s)
    return out
