"""Domain exceptions for the Notifications bounded context."""


class NotificationDeliveryError(Exception):
    """Raised when a notification could not reach the provider at all.

    Provider-level rejections (non-2xx responses) are not errors: they are
    returned as a DeliveryResult. This exception covers transport failures
    such as refused connections and timeouts.
    """

    def __init__(self, message: str, channel: str | None = None):
        super().__init__(message)
        self.channel = channel
