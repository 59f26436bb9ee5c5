"""Menu failure kinds.

Every failure is a local validation failure: the store rejects the call
before touching state, so callers can report it and keep using the store.
"""


class MenuError(Exception):
    """Base for all menu failures; carries what the HTTP layer needs."""

    code = 'MENU_ERROR'
    http_status = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_response(self) -> dict:
        return {
            'status': 'error',
            'error': {
                'code': self.code,
                'message': self.message,
            },
        }


class InvalidPayload(MenuError):
    """Missing or malformed field in an action payload."""

    code = 'INVALID_PAYLOAD'

    def __init__(self, message: str, field: str = None):
        super().__init__(message)
        self.field = field


class AlreadyExists(MenuError):
    code = 'ALREADY_EXISTS'

    def __init__(self, item_name: str, resource_type: str = 'Item'):
        super().__init__(f"{resource_type} '{item_name}' already exists")
        self.item_name = item_name
        self.resource_type = resource_type


class NotFound(MenuError):
    code = 'NOT_FOUND'
    http_status = 404

    def __init__(self, resource_type: str, resource_id: str):
        super().__init__(f"{resource_type} '{resource_id}' not found")
        self.resource_type = resource_type
        self.resource_id = resource_id


class UnknownAction(MenuError):
    code = 'UNKNOWN_ACTION'

    def __init__(self, action):
        super().__init__(f"Invalid action '{action}'")
        self.action = action
