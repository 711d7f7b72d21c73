"""lodash-style ``unset`` for nested dicts and lists.

::

    data = {"user": {"name": {"message": "Required"}, "email": True}}
    unset(data, "user.name")      # True
    data                          # {"user": {"email": True}}

``unset`` mutates *target* in place and always returns ``True``: a missing
segment, an empty path or a scalar target simply means there is nothing to
delete.  List slots are deleted sparsely, i.e. replaced by ``None`` so the
indices of the remaining items do not shift.
"""

from __future__ import annotations

import logging
from collections.abc import MutableMapping, MutableSequence
from typing import Any, Tuple

from .paths import MISSING, find_key, is_container, to_segments

logger = logging.getLogger(__name__)


def _resolve_parent(target: Any, segments: Tuple[Any, ...]) -> Any:
    """Walk all segments but the last; return the parent container or ``MISSING``."""
    cur: Any = target
    for depth, segment in enumerate(segments[:-1]):
        key = find_key(cur, segment)
        if key is MISSING:
            logger.debug("segment %r missing at depth %d", segment, depth)
            return MISSING
        cur = cur[key]
        if not is_container(cur):
            logger.debug("segment %r holds a scalar at depth %d", segment, depth)
            return MISSING
    return cur


def unset(target: Any, path: Any) -> bool:
    """Remove the value at *path* inside *target*.

    Args:
        target: Nested structure of mappings/sequences.  Anything else is
                left alone.
        path:   Dot-delimited string, list/tuple of segments, or any scalar
                (stringified, then split on ``"."``).

    Returns:
        Always ``True``.
    """
    if not is_container(target):
        logger.debug("unset: target %s is not a container", type(target).__name__)
        return True

    segments = to_segments(path)
    if not segments:
        return True

    parent = _resolve_parent(target, segments)
    if parent is MISSING:
        return True

    key = find_key(parent, segments[-1])
    if key is MISSING:
        return True

    if isinstance(parent, MutableMapping):
        del parent[key]
    elif isinstance(parent, MutableSequence):
        parent[key] = None
    else:
        logger.debug("unset: %s is immutable, %r kept", type(parent).__name__, key)
        return True

    logger.debug("unset: removed %r", segments)
    return True


def has(target: Any, path: Any) -> bool:
    """Return ``True`` if *path* resolves inside *target*.

    Uses the same lookup rules as ``unset``, so ``has(t, p)`` tells whether
    ``unset(t, p)`` would delete something (immutable parents aside).
    """
    if not is_container(target):
        return False

    segments = to_segments(path)
    if not segments:
        return False

    parent = _resolve_parent(target, segments)
    return parent is not MISSING and find_key(parent, segments[-1]) is not MISSING
