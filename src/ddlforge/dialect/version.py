"""Best-effort database major-version lookup with a bounded timeout."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable

from ddlforge.dialect.base import Dialect

logger = logging.getLogger("ddlforge.dialect.version")

VersionProbe = Callable[[], int | None]

DEFAULT_PROBE_TIMEOUT_SECONDS = 5.0


class _ProbeRun:
    """Outcome of one probe call, filled in by the worker thread."""

    def __init__(self, probe: VersionProbe) -> None:
        self._probe = probe
        self.version: int | None = None
        self.error: Exception | None = None

    def __call__(self) -> None:
        try:
            self.version = self._probe()
        except Exception as exc:  # noqa: BLE001
            self.error = exc


def resolve_major_version(
    dialect: Dialect,
    explicit: int | None = None,
    probe: VersionProbe | None = None,
    timeout: float = DEFAULT_PROBE_TIMEOUT_SECONDS,
) -> int | None:
    """Return the major version to generate for.

    An explicit version wins. Otherwise ``probe`` (typically a query against a
    live connection) is consulted; if it raises, times out or returns ``None``
    the dialect's ``default_major_version`` is used. Never raises.

    The probe runs on a daemon thread, so a probe that never returns is
    abandoned after ``timeout`` and does not hold up interpreter exit.
    """
    if explicit is not None:
        return explicit
    if probe is None:
        return dialect.default_major_version

    run = _ProbeRun(probe)
    worker = threading.Thread(target=run, daemon=True, name="ddlforge-version-probe")
    worker.start()
    worker.join(timeout)

    if worker.is_alive():
        logger.warning(
            "Version probe for %s timed out after %.1fs; assuming version %s",
            dialect.name, timeout, dialect.default_major_version,
        )
        return dialect.default_major_version
    if run.error is not None:
        logger.warning(
            "Version probe for %s failed (%s); assuming version %s",
            dialect.name, run.error, dialect.default_major_version,
        )
        return dialect.default_major_version
    if run.version is None:
        logger.debug("Version probe for %s returned nothing", dialect.name)
        return dialect.default_major_version
    return run.version
