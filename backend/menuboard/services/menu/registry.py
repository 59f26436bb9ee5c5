import logging
import random
import string
import threading
from typing import Dict, Tuple

from menuboard.errors import AlreadyExists
from .store import MenuStore


logger = logging.getLogger(__name__)

TOKEN_ALPHABET = string.ascii_letters + string.digits


def generate_session_token(length=8):
    """Random alphanumeric token; collisions are not checked."""
    return ''.join(random.choices(TOKEN_ALPHABET, k=length))


class SessionRegistry:
    """Maps session tokens to independent menu stores.

    Unknown tokens are provisioned on first access, for reads and updates
    alike. Sessions live for the lifetime of the process. The registry lock
    only guards the token map; item mutations happen under each store's
    own lock. Creating a token that is already registered is rejected
    rather than replacing the live store.
    """

    def __init__(self, token_length=8):
        self.token_length = token_length
        self._sessions: Dict[str, MenuStore] = {}
        self._lock = threading.Lock()

    def create(self, token: str = None) -> Tuple[str, MenuStore]:
        if token is None:
            token = generate_session_token(self.token_length)
        store = MenuStore()
        with self._lock:
            if token in self._sessions:
                raise AlreadyExists(token, resource_type='Session')
            self._sessions[token] = store
        logger.info("[session-create] session=%s", token)
        return token, store

    def resolve(self, token: str) -> MenuStore:
        store = self._sessions.get(token)
        if store is not None:
            return store
        with self._lock:
            store = self._sessions.get(token)
            if store is None:
                store = MenuStore()
                self._sessions[token] = store
                logger.info("[session-provision] session=%s", token)
        return store

    def __contains__(self, token):
        return token in self._sessions

    def __len__(self):
        return len(self._sessions)
