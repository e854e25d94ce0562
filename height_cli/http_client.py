"""Shared HTTP session for Height API calls.

No retry adapter is mounted: every request is attempted exactly once.
"""

import requests

_session: requests.Session | None = None


def get_session() -> requests.Session:
    """Return the process-wide requests.Session, creating it on first use."""
    global _session
    if _session is None:
        _session = requests.Session()
        _session.headers["Accept"] = "application/json"
    return _session
