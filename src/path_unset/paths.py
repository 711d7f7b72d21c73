"""Path normalization and key lookup.

A *path* comes in two shapes:

* a ``list`` / ``tuple`` of segments, used as-is (``["a.b"]`` is one key);
* any other value, converted with ``str()`` and split on ``"."``.

Lookup is permissive: a segment addresses a mapping key either directly or
through its int/str twin (``1`` ↔ ``"1"``), and a sequence index when it is
an in-bounds non-negative integer (or canonical integer string).

Exports
-------
MISSING
    Sentinel returned by ``find_key`` when a segment does not resolve.
to_segments
    Normalize a path into a tuple of segments.
is_container
    Whether a value can be descended into.
find_key
    Resolve a segment to the concrete key/index stored in a container.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any, Tuple

logger = logging.getLogger(__name__)

MISSING = object()

_SCALAR_SEQUENCES = (str, bytes, bytearray)


def to_segments(path: Any) -> Tuple[Any, ...]:
    """Normalize *path* into a tuple of segments.

    Examples::

        to_segments("a.b.c")       → ("a", "b", "c")
        to_segments(["a", "b.c"])  → ("a", "b.c")
        to_segments(1)             → ("1",)
        to_segments("")            → ("",)
        to_segments([])            → ()

    Identity-only keys (e.g. ``object()`` sentinels) are stringified like any
    other scalar, so they never address a key equal to themselves.  Pass
    them inside a list to look them up by identity.

    A scalar whose ``str()`` raises addresses nothing and yields ``()``.
    """
    if isinstance(path, (list, tuple)):
        return tuple(path)
    try:
        text = str(path)
    except Exception:
        logger.debug("path %s cannot be stringified", type(path).__name__, exc_info=True)
        return ()
    return tuple(text.split("."))


def is_container(value: Any) -> bool:
    """Return ``True`` for mappings and non-string sequences."""
    if isinstance(value, Mapping):
        return True
    return isinstance(value, Sequence) and not isinstance(value, _SCALAR_SEQUENCES)


def _canonical_int(segment: str) -> Any:
    # "1" and "-1" qualify, "01", " 1" and "1_0" do not
    try:
        value = int(segment)
    except ValueError:
        return MISSING
    return value if str(value) == segment else MISSING


def _as_index(segment: Any) -> Any:
    if isinstance(segment, bool):
        return MISSING
    if isinstance(segment, int):
        return segment
    if isinstance(segment, str):
        return _canonical_int(segment)
    return MISSING


def _twin(segment: Any) -> Any:
    """The int/str spelling of *segment* that a mapping may use instead."""
    if isinstance(segment, bool):
        return MISSING
    if isinstance(segment, int):
        return str(segment)
    if isinstance(segment, str):
        return _canonical_int(segment)
    return MISSING


def _number_kind(value: Any) -> Any:
    # bool, int and float compare equal across kinds; keys only match within one
    if isinstance(value, bool):
        return bool
    if isinstance(value, int):
        return int
    if isinstance(value, float):
        return float
    return None


def _mapping_key(container: Mapping, candidate: Any) -> Any:
    kind = _number_kind(candidate)
    if kind is None:
        try:
            return candidate if candidate in container else MISSING
        except TypeError:
            # unhashable
            return MISSING
    if candidate not in container:
        return MISSING
    for key in container:
        if _number_kind(key) is kind and key == candidate:
            return key
    return MISSING


def find_key(container: Any, segment: Any) -> Any:
    """Return the key or index of *container* addressed by *segment*.

    Numeric segments only match keys of the same kind: ``True`` never
    addresses the key ``1`` and ``1.0`` never addresses ``1`` or a list slot.

    Returns ``MISSING`` when nothing matches; never raises.
    """
    if isinstance(container, Mapping):
        for candidate in (segment, _twin(segment)):
            if candidate is MISSING:
                continue
            key = _mapping_key(container, candidate)
            if key is not MISSING:
                return key
        return MISSING

    if is_container(container):
        idx = _as_index(segment)
        if idx is not MISSING and 0 <= idx < len(container):
            return idx

    return MISSING
