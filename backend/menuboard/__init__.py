from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO
from config import Config
from menuboard.errors import MenuError
from menuboard.services.menu import BroadcastSequencer, MenuStore, SessionRegistry

socketio = SocketIO(async_mode=None)


def create_app(config_class=Config, menu_store=None, session_registry=None):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)
    flask_app.logger.setLevel(flask_app.config.get('LOG_LEVEL', 'INFO'))

    allowed_origins = flask_app.config.get('CORS_ORIGINS', [])
    CORS(flask_app, origins=allowed_origins)
    socketio.init_app(flask_app, cors_allowed_origins=allowed_origins)

    # Menu state is owned by the app instance, never by a module global
    if menu_store is None:
        menu_store = MenuStore()
    if session_registry is None:
        session_registry = SessionRegistry(token_length=flask_app.config.get('SESSION_TOKEN_LENGTH', 8))
    flask_app.extensions['menu_store'] = menu_store
    flask_app.extensions['session_registry'] = session_registry
    flask_app.extensions['menu_broadcasts'] = BroadcastSequencer()

    from menuboard.main import main
    flask_app.register_blueprint(main)

    from menuboard.api.menu import menu_api
    flask_app.register_blueprint(menu_api)

    from menuboard.socketio_events import register_socketio_handlers
    register_socketio_handlers(testing=flask_app.config.get('TESTING', False))

    @flask_app.errorhandler(MenuError)
    def handle_menu_error(exc):
        flask_app.logger.warning(f"[menu-error] code={exc.code} message={exc.message}")
        return exc.to_response(), exc.http_status

    return flask_app
