from flask import Blueprint, jsonify, request, current_app
from menuboard import socketio
from menuboard.errors import InvalidPayload


menu_api = Blueprint('menu_api', __name__)

# Room name used for the process-wide menu served by /api/menu
DEFAULT_ROOM_KEY = '_default'


def _registry():
    return current_app.extensions['session_registry']


def _default_store():
    return current_app.extensions['menu_store']


def resolve_store(session):
    """Store behind a session key; the default key maps to the process-wide menu."""
    if session == DEFAULT_ROOM_KEY:
        return _default_store()
    return _registry().resolve(session)


def _ok(data, status=200):
    return jsonify({'status': 'ok', 'data': data}), status


def _decode_update():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise InvalidPayload('Request body must be a JSON object')
    item, action = data.get('item'), data.get('action')
    # remove has no preconditions: a missing item name is simply absent
    if action == 'remove' and item is None:
        item = ''
    if not isinstance(item, str) or (not item and action != 'remove'):
        raise InvalidPayload('Item is required', field='item')
    return item, action, data.get('data')


def _apply_update(store, room_key):
    item, action, payload = _decode_update()
    revision, items = store.versioned_apply(item, action, payload)
    current_app.logger.info(f"[menu-update] session={room_key} item={item} action={action} revision={revision}")

    def send():
        socketio.emit(
            'menu_update',
            {'session': room_key, 'revision': revision, 'items': items},
            to=f"menu:{room_key}",
            namespace='/ws',
        )

    # Store lock is already released; ordering is kept per room by the sequencer
    current_app.extensions['menu_broadcasts'].publish(room_key, revision, send)
    return _ok(items)


@menu_api.route('/new', methods=['POST'])
def create_session():
    token, store = _registry().create()
    return _ok({'uri': token, 'menu': {'items': store.snapshot()}}, 201)


@menu_api.route('/api/<string:session>/menu', methods=['GET'])
def get_session_menu(session):
    return _ok(resolve_store(session).snapshot())


@menu_api.route('/api/<string:session>/update', methods=['POST'])
def update_session_menu(session):
    return _apply_update(resolve_store(session), session)


@menu_api.route('/api/menu', methods=['GET'])
def get_default_menu():
    return _ok(_default_store().snapshot())


@menu_api.route('/api/update', methods=['POST'])
def update_default_menu():
    return _apply_update(_default_store(), DEFAULT_ROOM_KEY)
