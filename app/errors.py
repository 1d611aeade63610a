class RelayError(Exception):
    """Base error for failures surfaced to API callers."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(RelayError):
    """Required input is missing or malformed."""

    status_code = 400


class ProviderError(RelayError):
    """A messaging or storage provider rejected the request."""

    status_code = 500

    def __init__(self, provider: str, message: str):
        super().__init__(message)
        self.provider = provider
