#------------------------------------------------------------
#                            app.py
#        Exposes the stats card over HTTP with Flask.

import os
from typing import Callable, Mapping, Optional
from flask import Flask, Response
from .config import STATS_ROUTE
from .controller import handle_stats_request
from .models import CardConfig
from .services.github_service import GitHubService

# This function does build the Flask application serving the card.
# The environment mapping is read on every request, defaulting to os.environ.
def create_app(
    environ: Optional[Mapping[str, str]] = None,
    service_factory: Callable[[CardConfig], GitHubService] = GitHubService,
) -> Flask:
    app = Flask(__name__)

    @app.route(STATS_ROUTE, methods=["GET"])
    def stats_card() -> Response:
        result = handle_stats_request(os.environ if environ is None else environ, service_factory)
        return Response(
            result.body,
            status=result.status,
            headers=result.headers,
            content_type=result.content_type,
        )

    return app
