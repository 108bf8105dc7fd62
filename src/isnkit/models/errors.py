"""Exceptions raised by isnkit."""

__all__ = ["InvalidIdentifierError"]


class InvalidIdentifierError(ValueError):
    """Raised when an identifier is outside the domain of an operation."""

    def __init__(
        self,
        message: str,
        identifier: str | None = None,
    ) -> None:
        """Initialize invalid identifier error.

        Parameters
        ----------
        message : str
            Error message.
        identifier : str | None, optional
            Identifier that caused the error.
        """
        super().__init__(message)
        self.identifier = identifier
