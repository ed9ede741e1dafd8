"""
id_allocator.py — Hands out unique genome identifiers.

One allocator belongs to whoever creates genomes (normally a Simulation)
and is passed to Genome.random explicitly. Simulation workers may share
it across threads: next_id() is a locked fetch-and-increment, so no id
is issued twice and no increment is lost.
"""

import threading

from definitions import ID_MAX


class IdAllocator:
    def __init__(self, start=0):
        if not 0 <= start <= ID_MAX + 1:
            raise ValueError(f"start out of 32-bit range: {start}")
        self._next = start
        self._start = start
        self._lock = threading.Lock()

    def next_id(self) -> int:
        """Return the next identifier: start, start+1, start+2, ..."""
        with self._lock:
            issued = self._next
            if issued > ID_MAX:
                raise OverflowError("32-bit identifier space exhausted")
            self._next = issued + 1
        return issued

    def current_value(self) -> int:
        """How many identifiers have been issued so far"""
        with self._lock:
            return self._next - self._start

    def __repr__(self):
        return f"IdAllocator(issued={self.current_value()})"
