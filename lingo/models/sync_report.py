"""Reconciliation result model."""

from dataclasses import dataclass, field


@dataclass
class SyncReport:
    """Outcome of comparing a dictionary against keys found in source.

    Attributes:
        found: Deduplicated keys referenced in source
        missing: Found keys absent from the dictionary
        unused: Dictionary keys not referenced in source

    """

    found: list[str] = field(default_factory=list)
    missing: list[str] = field(default_factory=list)
    unused: list[str] = field(default_factory=list)

    def in_sync(self) -> bool:
        """Check if nothing is missing and nothing is unused."""
        return not self.missing and not self.unused
