"""Failure kinds raised by the estate data adapter."""


class EstateAdapterError(RuntimeError):
    """Base class for failures of a single fetch-and-encode invocation."""


class RequestFailure(EstateAdapterError):
    """Raised on transport failures or remote-reported errors."""


class MalformedResponse(EstateAdapterError):
    """Raised when the remote payload does not match the expected shape."""
