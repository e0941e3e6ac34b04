class TransportError(RuntimeError):
    """Raised when the grading service fails (network errors, timeouts, non-2xx, bad envelope)."""

    def __init__(self, message: str, status_code: int | None = None, body: str = "") -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class ParseError(RuntimeError):
    """Raised when grading output cannot be read as the expected JSON record."""

    def __init__(self, message: str, raw: str = "") -> None:
        super().__init__(message)
        self.raw = raw
