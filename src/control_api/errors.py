"""Errors raised by the control API models and client."""


class ValidationFailed(ValueError):
    """Request validation failed; carries every violated rule."""

    def __init__(self, errors: list[str]):
        self.errors = list(errors)
        super().__init__("; ".join(self.errors))


class InvalidNameError(ValueError):
    """Malformed resource name rejected before rule aggregation."""


class APIError(Exception):
    """API error with status code and details."""

    def __init__(self, status_code: int, message: str, code: str = ""):
        self.status_code = status_code
        self.message = message
        self.code = code
        super().__init__(f"[{status_code}] {message}")
