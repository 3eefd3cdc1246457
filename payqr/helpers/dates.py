"""Hjelpefunksjoner for datoer i betalingskoder."""

from __future__ import annotations

from datetime import date, datetime
from functools import lru_cache
from typing import Optional, Union

from ..constants import DATE_FORMAT

__all__ = ["format_payment_date", "parse_payment_date"]


def format_payment_date(value: Optional[Union[date, datetime]]) -> str:
    """Formatterer en dato som ``YYYYMMDD``; ``None`` gir tom streng."""

    if value is None:
        return ""
    return value.strftime(DATE_FORMAT)


def parse_payment_date(value: object) -> Optional[date]:
    """Forsøk å tolke en dato fra fritekst eller dato-objekter."""

    # NaN og NaT er ulik seg selv
    if value is None or value != value:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value

    text = str(value).strip()
    if not text or text.lower() in {"nan", "nat", "none"}:
        return None

    return _parse_payment_date_cached(text)


@lru_cache(maxsize=1024)
def _parse_payment_date_cached(text: str) -> Optional[date]:
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        pass

    formats = (
        DATE_FORMAT,
        "%Y-%m-%d",
        "%d.%m.%Y",
        "%d-%m-%Y",
        "%d/%m/%Y",
        "%Y.%m.%d",
    )
    for fmt in formats:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue

    return None
