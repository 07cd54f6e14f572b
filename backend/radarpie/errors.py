"""Layout engine error types.

All of them propagate synchronously to the caller of ``build_layout``.
Budget overflow (minimum x count > total) is not an error: it
is logged and the floors are applied.
"""

from __future__ import annotations


class LayoutError(Exception):
    """Base class for layout engine failures."""


class MissingReferenceError(LayoutError, KeyError):
    """A snapshot entity points at a ring, slice or group id that does not exist."""

    def __init__(self, kind: str, ref_id: str, referrer: str) -> None:
        self.kind = kind
        self.ref_id = ref_id
        self.referrer = referrer
        super().__init__(f"{referrer} references unknown {kind} id {ref_id!r}")

    def __str__(self) -> str:
        # KeyError would repr() the message
        return str(self.args[0])


class InvalidAngleError(LayoutError, ValueError):
    """Anchor classification got an angle outside [0, 2*pi]."""


class ConfigurationError(LayoutError, ValueError):
    """Unknown key or wrong value type in a layout configuration override."""
