"""Error taxonomy shared by every API module.

Each error carries the HTTP status and the stable error code the API returns
for it. Internal details stay in ``message`` and are only logged.
"""


class ShopError(Exception):
    """Base class for errors raised by the storefront backend."""

    status_code = 500
    code = "INTERNAL_ERROR"
    public_message = "Error interno del servidor"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.public_message)
        self.message = message or self.public_message


class ValidationError(ShopError):
    """A required request field is missing or malformed."""

    status_code = 400
    code = "VALIDATION_ERROR"
    public_message = "Solicitud inválida"


class NotFound(ShopError):
    status_code = 404
    code = "NOT_FOUND"
    public_message = "Recurso no encontrado"


class PersistenceError(ShopError):
    """The data store rejected a statement or could not be reached."""

    status_code = 500
    code = "DB_ERROR"
    public_message = "Error interno del servidor"


class UpstreamNotificationError(ShopError):
    """Email or chat delivery failed. Logged, never returned to callers."""

    code = "NOTIFICATION_ERROR"
