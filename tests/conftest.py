import pytest
from unittest.mock import MagicMock

from height_cli.config import Settings, get_settings
from height_cli.context import AppContext


# --- Canned API responses ---

HEIGHT_LIST_INBOX = {
    "id": "list-inbox-1",
    "model": "list",
    "type": "inbox",
    "key": "inbox",
    "description": "",
    "url": "https://height.app/inbox",
    "hue": None,
    "visualization": "list",
}

HEIGHT_LIST_ROADMAP = {
    "id": "list-roadmap-2",
    "model": "list",
    "type": "list",
    "key": "roadmap",
    "description": "Product roadmap",
    "url": "https://height.app/roadmap",
    "hue": 210,
    "visualization": "kanban",
}

HEIGHT_LISTS = [HEIGHT_LIST_INBOX, HEIGHT_LIST_ROADMAP]

HEIGHT_TASK = {
    "id": "task-123",
    "model": "task",
    "index": 42,
    "listIds": ["list-roadmap-2", "list-inbox-1"],
    "name": "Ship the CLI",
    "description": "First release",
    "status": ["backLog"],
    "parentTaskId": None,
    "fields": [{"fieldTemplateId": "f1", "value": "high"}],
}


def make_response(status_code: int = 200, json_data=None, text: str = "") -> MagicMock:
    resp = MagicMock()
    resp.status_code = status_code
    if json_data is None:
        resp.json.side_effect = ValueError("No JSON object could be decoded")
    else:
        resp.json.return_value = json_data
    resp.text = text
    return resp


@pytest.fixture(autouse=True)
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings(tmp_path):
    return Settings(state_dir=tmp_path / ".tmp")


@pytest.fixture
def mock_session():
    session = MagicMock()
    session.get.return_value = make_response(json_data=HEIGHT_LISTS)
    return session


@pytest.fixture
def app(settings, mock_session):
    """AppContext with a fixed key and a mocked HTTP session."""
    return AppContext(settings=settings, api_key="secret-key", session=mock_session)
