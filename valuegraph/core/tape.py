# valuegraph/core/tape.py
from __future__ import annotations
import itertools
import logging
import threading
import weakref
from typing import Optional
from contextlib import contextmanager

logger = logging.getLogger(__name__)

# Process-wide node id source; never reset, shared by every tape
_id_counter = itertools.count()
_id_lock = threading.Lock()


def next_id() -> int:
    """Return a fresh node id, unique and increasing for the process lifetime."""
    with _id_lock:
        return next(_id_counter)


class Tape:
    """
    Records Nodes in construction order.

    Records are weak and keyed by node id, so a tape never keeps a node
    alive and a collected node's record disappears with it. Ids increase
    with construction, so insertion order is construction order.
    """
    def __init__(self):
        self._records: weakref.WeakValueDictionary = weakref.WeakValueDictionary()

    def reset(self):
        self._records.clear()

    def push_node(self, node):
        """
        Record `node` on the tape.
        Returns the id it was recorded under.
        """
        self._records[node.id] = node
        logger.debug("Recorded node %d", node.id)
        return node.id

    @property
    def nodes(self) -> list:
        return list(self._records.values())

    def __len__(self):
        return len(self._records)

    def __repr__(self):
        return f"Tape(nodes={len(self)})"

# Global default tape
global_tape = Tape()

@contextmanager
def use_tape(tape: Optional[Tape] = None):
    """
    Context manager to temporarily record on a fresh tape:
        with use_tape() as tape:
            ... build expression ...
            tape.nodes
    """
    from . import tape as _tape_mod  # module access so callers see the swap
    prev = _tape_mod.global_tape
    try:
        # an empty Tape is falsy, so test against None
        _tape_mod.global_tape = tape if tape is not None else Tape()
        yield _tape_mod.global_tape
    finally:
        _tape_mod.global_tape = prev
