"""Rule accumulator used by request validation."""

from .errors import ValidationFailed


class Validator:
    """
    Collector for rule violations during request validation.

    Rules are checked with :meth:`must`; failures are recorded instead of
    raised so a single ``valid()`` call can report every problem at once.
    """

    def __init__(self):
        self._errors: list[str] = []

    def must(self, ok: bool, message: str) -> bool:
        """Record ``message`` when ``ok`` is false. Returns ``ok``."""
        if not ok:
            self._errors.append(message)
        return ok

    def is_valid(self) -> bool:
        return not self._errors

    def get_errors(self) -> list[str]:
        """Get all collected messages."""
        return list(self._errors)


def wrap_validate(v: Validator) -> ValidationFailed | None:
    """Turn the collected violations into a single error, or None if there are none."""
    if v.is_valid():
        return None
    return ValidationFailed(v.get_errors())
