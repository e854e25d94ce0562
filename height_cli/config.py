from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    api_base_url: str = "https://api.height.app/"
    state_dir: Path = Path(".tmp")
    api_key_filename: str = "height-api-key"
    log_level: str = "WARNING"
    request_timeout: float | None = None
    # Height has not confirmed which parameter filters lists; unset means the query is not sent
    list_search_param: str | None = None

    model_config = {"env_prefix": "HEIGHT_", "env_file": ".env", "env_file_encoding": "utf-8"}

    @property
    def api_key_file(self) -> Path:
        return self.state_dir / self.api_key_filename


@lru_cache
def get_settings() -> Settings:
    return Settings()
