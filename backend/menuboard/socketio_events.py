from menuboard import socketio
from menuboard.api.menu import resolve_store
from flask_socketio import join_room, leave_room, emit


def _room_for(data):
    session = (data or {}).get('session')
    if not session or not isinstance(session, str):
        emit('error', {'message': 'session is required'})
        return None
    return f"menu:{session}"


def handle_connect():
    emit('connected', {'message': 'Connected to /ws'})


def handle_join_menu(data):
    room = _room_for(data)
    if room is None:
        return
    join_room(room)
    # Send the current menu so a late joiner does not wait for the next update
    store = resolve_store(data['session'])
    revision, items = store.versioned_snapshot()
    emit('joined', {'room': room, 'revision': revision, 'items': items})


def handle_leave_menu(data):
    room = _room_for(data)
    if room is None:
        return
    leave_room(room)
    emit('left', {'room': room})


def handle_ping(data):
    emit('pong', data or {})


def register_socketio_handlers(testing: bool = False) -> None:
    """Register Socket.IO event handlers.

    Always register on namespace '/ws'. When testing is True, also mirror
    handlers on the default namespace '/' to accommodate the test harness.
    """
    for namespace in (('/ws', '/') if testing else ('/ws',)):
        socketio.on_event('connect', handle_connect, namespace=namespace)
        socketio.on_event('join_menu', handle_join_menu, namespace=namespace)
        socketio.on_event('leave_menu', handle_leave_menu, namespace=namespace)
        socketio.on_event('ping', handle_ping, namespace=namespace)
