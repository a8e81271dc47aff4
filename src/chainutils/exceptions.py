class ChainUtilsError(Exception):
    """Base for all chainutils errors."""


class InvalidChainTypeError(ChainUtilsError, ValueError):
    """Raised when text or a code does not name a known chain type."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"invalid chain type: {value!r}")
