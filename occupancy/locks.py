"""
In-process keyed locks for the allocation critical sections.

Lock order is fixed to avoid deadlocks: a tenant lock is always taken
before any room lock, and room locks needed together are taken in one
call (sorted by id). Locks on different keys never block each other.

Across processes the same sections are guarded by row locks
(select_for_update) and the partial unique constraints on TenantAssignment.
"""
import threading
import logging
from contextlib import contextmanager
from django.conf import settings
from core.constants import DefaultLimits
from core.exceptions import ConcurrencyConflict

logger = logging.getLogger(__name__)

TENANT = 'tenant'
ROOM = 'room'


class KeyedLockRegistry:
    """
    Hands out one lock per (namespace, id) key and forgets it once no
    caller is holding or waiting for it.
    """

    def __init__(self):
        self._guard = threading.Lock()
        self._locks = {}

    def _checkout(self, key):
        with self._guard:
            entry = self._locks.get(key)
            if entry is None:
                entry = [threading.Lock(), 0]
                self._locks[key] = entry
            entry[1] += 1
            return entry[0]

    def _checkin(self, key):
        with self._guard:
            entry = self._locks[key]
            entry[1] -= 1
            if entry[1] == 0:
                del self._locks[key]

    def _timeout(self):
        return getattr(settings, 'OCCUPANCY_LOCK_TIMEOUT', DefaultLimits.LOCK_TIMEOUT_SECONDS)

    @contextmanager
    def hold(self, namespace, *ids):
        """
        Hold the locks for every id in one namespace.

        Raises:
            ConcurrencyConflict: If a lock can't be acquired within OCCUPANCY_LOCK_TIMEOUT
        """
        keys = [(namespace, key_id) for key_id in sorted(set(ids))]
        acquired = []
        try:
            for key in keys:
                lock = self._checkout(key)
                if not lock.acquire(timeout=self._timeout()):
                    self._checkin(key)
                    logger.warning(f"Lock timeout on {key[0]} #{key[1]}")
                    raise ConcurrencyConflict(
                        message=f"Timed out waiting for {key[0]} {key[1]}",
                        details={"resource": key[0], "id": key[1]}
                    )
                acquired.append((key, lock))
            yield
        finally:
            for key, lock in reversed(acquired):
                lock.release()
                self._checkin(key)

    def tenant(self, tenant_id):
        return self.hold(TENANT, tenant_id)

    def rooms(self, *room_ids):
        return self.hold(ROOM, *room_ids)

    def held_keys(self):
        """Keys currently held or awaited"""
        with self._guard:
            return set(self._locks)


allocation_locks = KeyedLockRegistry()
