"""CORS origin allow-list shared by every request of the process.

The registry starts from the statically configured origins and only ever
grows: tenants append their frontend origin the first time their context
is initialized. It is owned by the application object, not by this module.
"""

from __future__ import annotations

import threading
from typing import Iterable, Iterator, Sequence

from tenancy.application.observability import (
    CorsOriginProbe,
    DefaultCorsOriginProbe,
)


def add_if_missing(origins: Sequence[str], candidate: str | None) -> tuple[str, ...]:
    """Return ``origins`` with ``candidate`` appended unless already present.

    Empty or non-string candidates leave the origins unchanged. Order is
    preserved and the input is never mutated.

    Args:
        origins: Current allow-list
        candidate: Origin to add

    Returns:
        The resulting allow-list
    """
    current = tuple(origins)
    if not isinstance(candidate, str) or not candidate or candidate in current:
        return current
    return (*current, candidate)


class CorsOriginRegistry:
    """Thread-safe, append-only, order-preserving set of allowed origins."""

    def __init__(
        self,
        origins: Iterable[str] = (),
        probe: CorsOriginProbe | None = None,
    ) -> None:
        seeded: tuple[str, ...] = ()
        for origin in origins:
            seeded = add_if_missing(seeded, origin)

        self._origins = seeded
        self._lock = threading.Lock()
        self._probe = probe or DefaultCorsOriginProbe()

    def register(self, origin: str, tenant_id: str | None = None) -> bool:
        """Append an origin to the allow-list.

        Args:
            origin: Origin to allow (scheme://host[:port])
            tenant_id: Tenant the origin belongs to, for logging

        Returns:
            True if the origin was added, False if it was empty or already present
        """
        with self._lock:
            updated = add_if_missing(self._origins, origin)
            if len(updated) == len(self._origins):
                return False
            self._origins = updated

        self._probe.origin_registered(origin=origin, tenant_id=tenant_id)
        return True

    def snapshot(self) -> tuple[str, ...]:
        """Return the allow-list as it is right now."""
        return self._origins

    def __contains__(self, origin: object) -> bool:
        return origin in self._origins

    def __iter__(self) -> Iterator[str]:
        return iter(self._origins)

    def __len__(self) -> int:
        return len(self._origins)
