"""Scanner state serialization as compact, versioned byte snapshots.

An incremental parser snapshots the external scanner's state at token
boundaries and restores it when it resumes lexing from that point. The
snapshot must be small and bounded, and decoding must never fail.

Wire format (little-endian):

    offset  size  field
    0       1     format version (FORMAT_VERSION)
    1       1     number of open levels (uint8)
    2       2     pending-dedent target (int16, -1 = unset)
    4       2*n   level widths (uint16 each)

Encoding writes at most ``buffer_size`` bytes; levels that do not fit are
left out. Decoding recovers as much as it can:

- empty input decodes to the fresh state
- an unknown version decodes to the fresh state
- a missing or short marker decodes as unset
- the level count is clamped to ``max_depth`` and to the levels present
- the result always starts at 0 and strictly increases

Example:
    from scriptlex.serialization import encode_state, decode_state

    data = encode_state((0, 3, 6), None)
    indents, pending = decode_state(data)
    assert indents == (0, 3, 6) and pending is None

Thread Safety:
    All functions are pure and safe to call from any thread.

"""

from __future__ import annotations

import struct
from collections.abc import Sequence

from scriptlex.config import STATE_HEADER_SIZE
from scriptlex.utils.logger import get_logger

logger = get_logger(__name__)

FORMAT_VERSION = 1

_HEADER = struct.Struct("<BBh")
_ENTRY = struct.Struct("<H")

_NO_PENDING = -1
_INT16_MAX = 0x7FFF
_UINT16_MAX = 0xFFFF

FRESH_STATE: tuple[tuple[int, ...], int | None] = ((0,), None)


def encode_state(
    indents: Sequence[int],
    pending_dedent: int | None,
    *,
    buffer_size: int = 1024,
) -> bytes:
    """Encode an indent stack and pending-dedent target.

    Args:
        indents: Open level widths, base level first.
        pending_dedent: Pending-dedent target, or None.
        buffer_size: Maximum number of bytes to produce.

    Returns:
        The snapshot. Widths above 65535 are stored as 65535; a target
        outside the int16 range is stored as unset.

    """
    marker = pending_dedent
    if marker is None or not 0 <= marker <= _INT16_MAX:
        marker = _NO_PENDING

    buffer = bytearray(_HEADER.pack(FORMAT_VERSION, min(len(indents), 0xFF), marker))
    for width in indents:
        if len(buffer) + _ENTRY.size > buffer_size:
            logger.debug("State snapshot truncated at %d bytes", len(buffer))
            break
        buffer += _ENTRY.pack(min(max(width, 0), _UINT16_MAX))
    return bytes(buffer)


def decode_state(
    data: bytes,
    *,
    max_depth: int = 100,
) -> tuple[tuple[int, ...], int | None]:
    """Decode a snapshot produced by encode_state.

    Never raises on malformed input; see the module docstring for how
    damaged snapshots degrade.

    Args:
        data: Snapshot bytes (may be empty or truncated).
        max_depth: Depth cap of the scanner being restored.

    Returns:
        (indents, pending_dedent) pair.

    """
    if not data:
        return FRESH_STATE

    version = data[0]
    if version != FORMAT_VERSION:
        logger.warning("Unknown scanner state version %d; starting fresh", version)
        return FRESH_STATE

    if len(data) < 2:
        logger.debug("State snapshot has no level count; starting fresh")
        return FRESH_STATE

    count = min(data[1], max_depth)

    pending: int | None = None
    if len(data) >= STATE_HEADER_SIZE:
        (marker,) = struct.unpack_from("<h", data, 2)
        if marker >= 0:
            pending = marker

    widths: list[int] = []
    offset = STATE_HEADER_SIZE
    while len(widths) < count and offset + _ENTRY.size <= len(data):
        (width,) = _ENTRY.unpack_from(data, offset)
        widths.append(width)
        offset += _ENTRY.size

    if len(widths) < data[1] and len(widths) < max_depth:
        logger.debug("State snapshot holds %d of %d levels", len(widths), data[1])

    return _normalize(widths), pending


def _normalize(widths: Sequence[int]) -> tuple[int, ...]:
    """Force a 0 base and cut the sequence where it stops increasing."""
    result = [0]
    for width in widths[1:]:
        if width <= result[-1]:
            break
        result.append(width)
    return tuple(result)
