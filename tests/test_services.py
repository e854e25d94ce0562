import pytest
from pydantic import ValidationError

from height_cli.models.common import Unimplemented
from height_cli.models.lists import ListModel, ListQueryOptions
from height_cli.services import lists as lists_service
from height_cli.services import tasks as tasks_service
from conftest import HEIGHT_LISTS


class TestFetchLists:
    @pytest.mark.parametrize("query", [None, "", "roadmap", "anything at all"])
    def test_returns_payload_regardless_of_query(self, app, query):
        result = lists_service.fetch_lists(app, ListQueryOptions(query=query))
        assert len(result) == 2
        assert all(isinstance(item, ListModel) for item in result)
        assert [item.model_dump(by_alias=True) for item in result] == HEIGHT_LISTS

    def test_query_not_sent_by_default(self, app, mock_session):
        lists_service.fetch_lists(app, ListQueryOptions(query="roadmap"))
        mock_session.get.assert_called_once()
        assert mock_session.get.call_args.args[0] == "https://api.height.app/list"

    def test_no_options(self, app, mock_session):
        lists_service.fetch_lists(app)
        assert mock_session.get.call_args.args[0] == "https://api.height.app/list"

    def test_query_sent_when_param_configured(self, app, mock_session):
        lists_service.fetch_lists(app, ListQueryOptions(query="roadmap", search_param="filters"))
        assert mock_session.get.call_args.args[0] == "https://api.height.app/list?filters=roadmap"

    def test_models_are_immutable(self, app):
        result = lists_service.fetch_lists(app)
        with pytest.raises(ValidationError):
            result[0].key = "changed"

    def test_unknown_fields_kept(self, app, mock_session):
        extra = dict(HEIGHT_LISTS[0], archivedAt=None, appearance={"icon": "inbox"})
        mock_session.get.return_value.json.return_value = [extra]
        result = lists_service.fetch_lists(app)
        assert result[0].model_dump(by_alias=True) == extra


class TestGetTask:
    def test_is_unimplemented(self, app):
        result = tasks_service.get_task(app, "task-123")
        assert isinstance(result, Unimplemented)
        assert result.operation == "task"
        assert result.resource_path == "tasks/task-123"
        assert "task-123" in result.message

    def test_makes_no_network_call(self, app, mock_session):
        tasks_service.get_task(app, "task-123")
        mock_session.get.assert_not_called()
