"""Local storage for the Height API key.

The key lives unencrypted in a single file under the state directory. On first
run the operator is prompted for it (input hidden) and the raw value is written
as-is; later runs read the file back verbatim.
"""

import logging
from collections.abc import Callable
from pathlib import Path

import click

from height_cli.config import Settings, get_settings

logger = logging.getLogger(__name__)

PROMPT_MESSAGE = "Enter your Height API key"


def _prompt_for_key() -> str:
    return click.prompt(PROMPT_MESSAGE, hide_input=True, err=True)


class CredentialStore:
    """Reads/writes the API key file, prompting once when it does not exist yet."""

    def __init__(self, state_dir: Path, key_file: Path, prompt: Callable[[], str] = _prompt_for_key):
        self.state_dir = state_dir
        self.key_file = key_file
        self.prompt = prompt
        self._api_key: str | None = None

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "CredentialStore":
        settings = settings or get_settings()
        return cls(settings.state_dir, settings.api_key_file)

    def ensure_state_dir(self) -> None:
        self.state_dir.mkdir(parents=True, exist_ok=True)

    def has_key(self) -> bool:
        return self.key_file.exists()

    def get_api_key(self) -> str:
        """Return the API key, resolving it on the first call only."""
        if self._api_key is not None:
            return self._api_key

        self.ensure_state_dir()
        if not self.has_key():
            api_key = self.prompt()
            self.key_file.write_bytes(api_key.encode("utf-8"))
            logger.info("Saved Height API key to %s", self.key_file)
        else:
            api_key = self.key_file.read_bytes().decode("utf-8")
            logger.debug("Loaded Height API key from %s", self.key_file)

        if api_key != api_key.strip():
            logger.warning(
                "Height API key in %s has leading/trailing whitespace; requests will likely be rejected",
                self.key_file,
            )
        self._api_key = api_key
        return api_key
