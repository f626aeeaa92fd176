"""Falcon ASGI application."""

import logging

import falcon
import falcon.asgi
from falcon.asgi import App

from ragdesk.interfaces.api.resources.chat import ChatResource
from ragdesk.interfaces.api.resources.content import ContentResource
from ragdesk.interfaces.api.resources.health import HealthResource
from ragdesk.interfaces.api.resources.ingest import IngestResource
from ragdesk.interfaces.api.resources.leads import LeadsResource

logger = logging.getLogger(__name__)


async def handle_unexpected_error(req, resp, ex, params) -> None:
    """Log anything the resources did not map and answer 500."""
    logger.exception("Unhandled error on %s %s", req.method, req.path, exc_info=ex)
    resp.status = falcon.HTTP_500
    resp.media = {"error": "Internal Server Error"}


def create_app(
    ingest_resource: IngestResource,
    chat_resource: ChatResource,
    content_resource: ContentResource,
    leads_resource: LeadsResource,
    health_resource: HealthResource,
    middleware: list | None = None,
) -> App:
    """Create Falcon ASGI app with routes."""
    app = falcon.asgi.App(middleware=middleware or [])
    app.add_error_handler(Exception, handle_unexpected_error)
    app.add_route("/health", health_resource)
    app.add_route("/health/ready", health_resource, suffix="ready")
    app.add_route("/ingest", ingest_resource)
    app.add_route("/chat", chat_resource)
    app.add_route("/content", content_resource)
    app.add_route("/leads", leads_resource)
    return app
