from dataclasses import dataclass

import requests

from height_cli.config import Settings, get_settings
from height_cli.credentials import CredentialStore
from height_cli.http_client import get_session


@dataclass(frozen=True)
class AppContext:
    """Everything a command needs, resolved once at startup."""

    settings: Settings
    api_key: str
    session: requests.Session


def build_context(settings: Settings | None = None, store: CredentialStore | None = None) -> AppContext:
    settings = settings or get_settings()
    store = store or CredentialStore.from_settings(settings)
    return AppContext(settings=settings, api_key=store.get_api_key(), session=get_session())
