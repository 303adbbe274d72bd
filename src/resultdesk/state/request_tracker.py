"""
In-flight tracking for backend calls.

Every call takes a ticket. A newer ticket for the same operation supersedes
the older ones, so a response that arrives after a later request was issued
is recognised as stale and dropped. Tickets are also numbered across all
operations so the shared status slot can keep the outcome of the most
recently started action.
"""

import threading
from dataclasses import dataclass
from typing import Dict, Optional


@dataclass(frozen=True)
class Ticket:
    operation: str
    token: int
    intent: int


class RequestTracker:
    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._intent = 0
        self._latest: Dict[str, int] = {}
        self._pending: Dict[str, int] = {}

    def begin(self, operation: str) -> Ticket:
        with self._lock:
            return self._begin_locked(operation)

    def _begin_locked(self, operation: str) -> Ticket:
        self._intent += 1
        token = self._latest.get(operation, 0) + 1
        self._latest[operation] = token
        self._pending[operation] = self._pending.get(operation, 0) + 1
        return Ticket(operation=operation, token=token, intent=self._intent)

    def try_begin(self, operation: str) -> Optional[Ticket]:
        """Like ``begin`` but returns None while ``operation`` is still in flight."""
        with self._lock:
            if self._pending.get(operation, 0) > 0:
                return None
            return self._begin_locked(operation)

    def finish(self, ticket: Ticket) -> bool:
        """Mark ``ticket`` done; True when no newer request for its operation exists."""
        with self._lock:
            remaining = self._pending.get(ticket.operation, 0) - 1
            if remaining > 0:
                self._pending[ticket.operation] = remaining
            else:
                self._pending.pop(ticket.operation, None)
            return self._latest.get(ticket.operation) == ticket.token

    def in_flight(self, operation: str) -> bool:
        with self._lock:
            return self._pending.get(operation, 0) > 0

