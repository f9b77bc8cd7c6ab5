class GatewayError(Exception):
    """Base for persistence failures; always recoverable at the call site."""


class StorageUnavailable(GatewayError):
    """The store could not be reached or initialised."""


class WriteFailed(GatewayError):
    pass


class ReadFailed(GatewayError):
    pass
