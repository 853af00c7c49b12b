from __future__ import annotations

import logging

from .classifier import classify
from .eras import ERAS, EraTable
from .errors import WarekiError
from .resolver import Conversion, ResolvedDate, resolve_detailed

logger = logging.getLogger("wareki_conv.converter")


def convert_detailed(text: str, eras: EraTable = ERAS) -> Conversion:
    if not isinstance(text, str):
        raise TypeError(f"expected str, got {type(text).__name__}")
    try:
        classified = classify(text)
        logger.debug("Classified %r as %s", text, classified.date_type.value)
        return resolve_detailed(classified, eras)
    except WarekiError as exc:
        logger.info("Rejected wareki input %r: %s (%s)", text, exc.code, exc.message)
        raise


def convert(text: str, eras: EraTable = ERAS) -> ResolvedDate:
    """Convert a wareki date string to a Gregorian date.

    Accepts the four notations listed in :mod:`wareki_conv.classifier`,
    full-width or half-width digits, unpadded fields and ``元年`` for year 1.
    Raises a :class:`~wareki_conv.errors.WarekiError` subclass naming the
    first problem found.

    >>> convert("平成元年２月３日").isoformat()
    '1989-02-03'
    """
    return convert_detailed(text, eras).date
