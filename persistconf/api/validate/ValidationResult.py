"""Validation result dataclass."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating a configuration.

    Each error starts with its violation code, e.g.
    ``"MissingSqlitePath: sqlite.path is required ..."``. Whether a non-empty
    error list is fatal is up to the caller.
    """

    errors: tuple[str, ...] = field(default_factory=tuple)

    @property
    def ok(self) -> bool:
        return not self.errors

    @property
    def codes(self) -> list[str]:
        """Violation codes in the order they were found."""
        return [error.split(":", 1)[0] for error in self.errors]

    def to_dict(self) -> dict:
        return {"ok": self.ok, "errors": list(self.errors)}
