class SpecValidationError(ValueError):
    """Raised when registry data is structurally malformed (duplicate ids, dangling references)."""


class UpstreamScoringError(RuntimeError):
    """Raised when a remote scoring call fails. The caller's profile must be left untouched."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code
