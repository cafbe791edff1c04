"""
histcal.engines.spx
-------------------
Compact persisted form of a History.

    byte 0     : (HISTORY_TYPE << 4) | variant code
    bytes 1..8 : only for variant OTHER, the cutover linear day as a
                 signed 64-bit big-endian integer

Well-known histories are restored by variant code alone, so the layout never
depends on how a History stores its events.
"""

from __future__ import annotations

import logging
import struct

from ..core.errors import InvalidConstructionError, PersistedFormError
from ..core.types import HistoryVariant
from .history import History

logger = logging.getLogger(__name__)

# Type discriminator shared with the other persisted kinds.
HISTORY_TYPE = 1

_START = struct.Struct(">q")


def encode_history(history: History) -> bytes:
    header = bytes([(HISTORY_TYPE << 4) | int(history.variant)])
    if history.variant == HistoryVariant.OTHER:
        try:
            return header + _START.pack(history.events[0].start)
        except struct.error as e:
            raise PersistedFormError(f"Cutover does not fit into 64 bits: {history.events[0].start}") from e
    return header


def decode_history(data: bytes) -> History:
    from .factory import (
        PROLEPTIC_GREGORIAN,
        PROLEPTIC_JULIAN,
        of_first_gregorian_reform,
        of_gregorian_reform,
        of_sweden,
    )

    data = bytes(data)
    if not data:
        raise PersistedFormError("Empty persisted form")
    header = data[0]
    if header >> 4 != HISTORY_TYPE:
        raise PersistedFormError(f"Not a persisted history (type {header >> 4})")
    try:
        variant = HistoryVariant(header & 0x0F)
    except ValueError:
        raise PersistedFormError(f"Unknown history variant: {header & 0x0F}") from None
    logger.debug("decoding persisted history, variant %s", variant.name)

    if variant == HistoryVariant.OTHER:
        if len(data) != 1 + _START.size:
            raise PersistedFormError(f"Expected {1 + _START.size} bytes, got {len(data)}")
        (start,) = _START.unpack_from(data, 1)
        try:
            return of_gregorian_reform(start)
        except InvalidConstructionError as e:
            raise PersistedFormError(f"Invalid persisted cutover: {e}") from e

    if len(data) != 1:
        raise PersistedFormError(f"Unexpected trailing bytes for variant {variant.name}")
    if variant == HistoryVariant.PROLEPTIC_GREGORIAN:
        return PROLEPTIC_GREGORIAN
    if variant == HistoryVariant.PROLEPTIC_JULIAN:
        return PROLEPTIC_JULIAN
    if variant == HistoryVariant.SWEDEN:
        return of_sweden()
    return of_first_gregorian_reform()
