"""Custom exceptions for the localization engine.

Only caller mistakes are raised. Missing, empty or malformed catalogue
files and missing keys are reported through logging instead.
"""


class LocalizationError(Exception):
    """Base exception for all localization errors.

    Example:
        try:
            engine.register_client("my.mod")
        except LocalizationError as e:
            logger.error("localization_error", error=str(e))
    """

    pass


class DuplicateClientError(LocalizationError):
    """Raised when a client id is registered twice.

    Example:
        >>> engine.register_client("my.mod")
        >>> engine.register_client("my.mod")
        Traceback (most recent call last):
        ...
        DuplicateClientError: Client 'my.mod' already registered
    """

    def __init__(self, client_id: str):
        self.client_id = client_id
        super().__init__(f"Client '{client_id}' already registered")


class ClientNotFoundError(LocalizationError, KeyError):
    """Raised when an operation names a client that was never registered."""

    def __init__(self, client_id: str):
        self.client_id = client_id
        super().__init__(f"Client '{client_id}' not registered")

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.args[0]
