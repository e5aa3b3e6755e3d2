"""Raise the soft limit on open files to the hard limit."""

from __future__ import annotations

import logging
import re
import resource
import subprocess
import sys

log = logging.getLogger(__name__)


def _darwin_max_files() -> int | None:
    try:
        completed = subprocess.run(
            ["/usr/sbin/sysctl", "-n", "kern.maxfilesperproc"],
            capture_output=True,
            text=True,
            check=True,
        )
    except (OSError, subprocess.SubprocessError) as err:
        log.warning("Failed to find rlimit from sysctl: %s", err)
        return None

    value = completed.stdout.strip("\n")
    if not re.fullmatch(r"[0-9]+", value):
        log.warning("Failed to parse rlimit from sysctl: %r", value)
        return None
    return int(value)


def raise_open_file_limit() -> int | None:
    """Set the open-file soft limit to the hard limit.

    On macOS the hard limit is capped by ``kern.maxfilesperproc``. Failures
    are logged; the new limit is returned, or ``None`` if it was not set.
    """
    try:
        _soft, hard = resource.getrlimit(resource.RLIMIT_NOFILE)
    except (OSError, ValueError) as err:
        log.warning("Failed to find rlimit from getrlimit: %s", err)
        return None

    if sys.platform == "darwin":
        sysctl_max = _darwin_max_files()
        if sysctl_max is None:
            return None
        if hard == resource.RLIM_INFINITY or hard > sysctl_max:
            hard = sysctl_max

    log.info("Initial RLIMIT_NOFILE cur: %d max: %d", _soft, hard)
    log.info("Setting RLIMIT_NOFILE cur: %d max: %d", hard, hard)

    try:
        resource.setrlimit(resource.RLIMIT_NOFILE, (hard, hard))
    except (OSError, ValueError) as err:
        log.warning("Failed to set rlimit: %s", err)
        return None
    return hard