"""
Read-through cache of shared-object arguments.

Resolving a shared object costs an RPC round-trip (its initial shared
version), and the same global config and pool objects appear in almost every
transaction. The cache is an ordinary instance owned by a client; the backing
mapping can be injected so tests and multi-client processes decide how much
is shared.

Entries are keyed by object id only. A later request with a different
`mutable` flag gets the cached entry back unchanged; use `refresh()` to
re-resolve an entry under a new flag.
"""

from __future__ import annotations

import logging
import threading
from typing import MutableMapping, Optional

from ..errors import MissingObjectIdError
from .collaborators import SharedObjectResolver
from .program import SharedObjectArg


logger = logging.getLogger(__name__)


class SharedObjectCache:
    def __init__(
        self,
        resolver: SharedObjectResolver,
        store: Optional[MutableMapping[str, SharedObjectArg]] = None,
    ) -> None:
        self._resolver = resolver
        self._store: MutableMapping[str, SharedObjectArg] = {} if store is None else store
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._store)

    def __contains__(self, object_id: object) -> bool:
        return object_id in self._store

    @staticmethod
    def _require_id(object_id: str) -> None:
        if not isinstance(object_id, str) or not object_id:
            raise MissingObjectIdError("objectId is null or empty")

    def get(self, object_id: str, mutable: bool) -> SharedObjectArg:
        self._require_id(object_id)
        cached = self._store.get(object_id)
        if cached is not None:
            if cached.mutable != mutable:
                logger.warning(
                    "shared object %s cached with mutable=%s, requested mutable=%s; returning cached entry",
                    object_id,
                    cached.mutable,
                    mutable,
                )
            return cached

        # Resolve outside the lock; concurrent builders may both resolve, first insert wins.
        resolved = self._resolver.resolve(object_id, mutable)
        with self._lock:
            stored = self._store.setdefault(object_id, resolved)
        logger.debug("cached shared object %s (mutable=%s)", object_id, stored.mutable)
        return stored

    def refresh(self, object_id: str, mutable: bool) -> SharedObjectArg:
        self._require_id(object_id)
        resolved = self._resolver.resolve(object_id, mutable)
        with self._lock:
            self._store[object_id] = resolved
        return resolved

    def invalidate(self, object_id: str) -> None:
        with self._lock:
            self._store.pop(object_id, None)

    def clear(self) -> None:
        with self._lock:
            self._store.clear()
