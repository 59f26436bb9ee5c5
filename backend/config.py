import os


def parse_address(address, default_port=8080):
    """Split ``host:port`` (host optional, as in ``:8080``) into a tuple."""
    host, _, port = (address or '').rpartition(':')
    if not _:
        host, port = address, ''
    return (host or '0.0.0.0'), int(port or default_port)


class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    # Listen address, "host:port"; an empty host binds all interfaces
    HTTP_ADDRESS = os.environ.get('HTTP_ADDRESS', ':8080')
    # Length of generated session tokens
    SESSION_TOKEN_LENGTH = int(os.environ.get('SESSION_TOKEN_LENGTH', '8'))
    CORS_ORIGINS = [o.strip() for o in os.environ.get(
        'CORS_ORIGINS', 'http://localhost:5173,http://127.0.0.1:5173'
    ).split(',') if o.strip()]
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
