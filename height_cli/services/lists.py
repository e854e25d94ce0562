import logging

from height_cli.client import api_request
from height_cli.context import AppContext
from height_cli.models.lists import ListModel, ListQueryOptions

logger = logging.getLogger(__name__)


def fetch_lists(ctx: AppContext, options: ListQueryOptions | None = None) -> list[ListModel]:
    """Retrieve all lists.

    The query is only attached when a search parameter name is known; otherwise
    it is accepted and not sent.
    """
    options = options or ListQueryOptions()

    def add_search(q: dict[str, str]) -> None:
        if options.query and options.search_param:
            q[options.search_param] = options.query

    if options.query and not options.search_param:
        logger.info("List filtering is not supported yet; ignoring query %r", options.query)

    return api_request(ctx, "list", list[ListModel], params=add_search)
