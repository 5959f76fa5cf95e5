import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse, Response

from pingserver.metrics import ServerMetrics

logger = logging.getLogger(__name__)

INDEX_TEXT = "Available endpoints:\n- /ping\n- /metrics"
NOT_FOUND_TEXT = "404 page not found\n"


def get_metrics(request: Request) -> ServerMetrics:
    return request.app.state.metrics


def ping(request: Request):
    get_metrics(request).record_ping()
    return PlainTextResponse("pong")


def metrics_endpoint(request: Request):
    body, content_type = get_metrics(request).render()
    return Response(body, media_type=content_type)


def index(request: Request):
    return PlainTextResponse(INDEX_TEXT)


def not_found(request: Request):
    logger.debug("no route for %s %s", request.method, request.url.path)
    get_metrics(request).record_not_found()
    return PlainTextResponse(NOT_FOUND_TEXT, status_code=404)


def create_app(metrics: Optional[ServerMetrics] = None) -> FastAPI:
    # docs routes would shadow the catch-all
    app = FastAPI(title="pingserver", docs_url=None, redoc_url=None, openapi_url=None)
    app.state.metrics = metrics if metrics is not None else ServerMetrics()

    # plain routes with methods=None match every HTTP method
    app.add_route("/ping", ping)
    app.add_route("/metrics", metrics_endpoint)
    app.add_route("/", index)
    app.add_route("/{path:path}", not_found)
    return app
