import logging
from typing import Any, Dict, Tuple

from menuboard.errors import AlreadyExists, InvalidPayload, NotFound, UnknownAction
from menuboard.models import MenuItem
from .locking import ReadWriteLock


logger = logging.getLogger(__name__)


def _require_string(payload: Any, field: str) -> str:
    if not isinstance(payload, dict):
        raise InvalidPayload(f"Payload must be an object with '{field}'", field=field)
    value = payload.get(field)
    if not isinstance(value, str) or not value:
        raise InvalidPayload(f"{field.capitalize()} is required", field=field)
    return value


class MenuStore:
    """Items of one menu, guarded by a single reader-writer lock.

    - snapshot() takes the lock shared, so reads run in parallel
    - apply() takes it exclusive for validation, mutation and the result
      snapshot, so no reader ever sees a half-applied action
    - a rejected action raises a MenuError and leaves the items untouched
    - every accepted action bumps ``revision``; the versioned variants return
      it together with the snapshot it belongs to
    """

    def __init__(self):
        self._items: Dict[str, MenuItem] = {}
        self._revision = 0
        self._lock = ReadWriteLock()

    @property
    def revision(self) -> int:
        with self._lock.read_locked():
            return self._revision

    def snapshot(self) -> Dict[str, dict]:
        return self.versioned_snapshot()[1]

    def versioned_snapshot(self) -> Tuple[int, Dict[str, dict]]:
        with self._lock.read_locked():
            return self._revision, self._snapshot_unlocked()

    def apply(self, item_name: str, action: str, payload: Any = None) -> Dict[str, dict]:
        return self.versioned_apply(item_name, action, payload)[1]

    def versioned_apply(self, item_name: str, action: str, payload: Any = None) -> Tuple[int, Dict[str, dict]]:
        handler = self._handlers.get(action) if isinstance(action, str) else None
        if handler is None:
            raise UnknownAction(action)
        with self._lock.write_locked():
            handler(self, item_name, payload)
            self._revision += 1
            return self._revision, self._snapshot_unlocked()

    def __len__(self):
        with self._lock.read_locked():
            return len(self._items)

    def __contains__(self, item_name):
        with self._lock.read_locked():
            return item_name in self._items

    def _snapshot_unlocked(self) -> Dict[str, dict]:
        return {name: item.to_dict() for name, item in self._items.items()}

    def _get_existing(self, item_name: str) -> MenuItem:
        item = self._items.get(item_name)
        if item is None:
            raise NotFound('Item', item_name)
        return item

    # ---- action handlers; called with the write lock held ----

    def _add(self, item_name, payload):
        _require_string(payload, 'name')
        if item_name in self._items:
            raise AlreadyExists(item_name)
        self._items[item_name] = MenuItem(item_name)
        logger.debug("[add] item=%s", item_name)

    def _remove(self, item_name, payload):
        if self._items.pop(item_name, None) is not None:
            logger.debug("[remove] item=%s", item_name)

    def _increment(self, item_name, payload):
        item = self._get_existing(item_name)
        owner = _require_string(payload, 'owner')
        item.increment(owner)

    def _decrement(self, item_name, payload):
        item = self._get_existing(item_name)
        owner = _require_string(payload, 'owner')
        if not item.decrement(owner):
            logger.debug("[decrement-floor] item=%s owner=%s count=%s", item_name, owner, item.count)

    _handlers = {
        'add': _add,
        'remove': _remove,
        'increment': _increment,
        'decrement': _decrement,
    }
