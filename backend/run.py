from config import parse_address
from menuboard import create_app, socketio

app = create_app()

if __name__ == '__main__':
    host, port = parse_address(app.config['HTTP_ADDRESS'])
    app.logger.info(f"Server started on http://{host}:{port}")
    # Use SocketIO server to enable websockets in dev
    socketio.run(app, host=host, port=port, allow_unsafe_werkzeug=True)
