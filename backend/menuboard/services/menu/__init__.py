"""Menu domain services: the locked item store, the session registry and
ordered publishing of store revisions.

HTTP routes and socket handlers import from here; nothing in this package
knows about Flask.
"""

from .broadcast import BroadcastSequencer
from .locking import ReadWriteLock
from .registry import SessionRegistry, generate_session_token
from .store import MenuStore

__all__ = ['BroadcastSequencer', 'MenuStore', 'ReadWriteLock', 'SessionRegistry', 'generate_session_token']
