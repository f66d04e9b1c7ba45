#------------------------------------------------------------
#                        controller.py
#        Coordinates config loading, the GitHub fetch,
#             aggregation and card rendering.

import sys
from typing import Callable, Mapping
from .config import (
    CACHE_CONTROL_HEADER,
    CARD_CONTENT_TYPE,
    ERROR_CONTENT_TYPE,
    SYSTEM_FAILURE_MESSAGE,
    load_config,
)
from .errors import ConfigError, RenderError, UpstreamError
from .models import CardConfig, CardResponse
from .services.github_service import GitHubService
from .services.language_service import build_top_languages
from .services.rank_service import calculate_rank
from .views.svg_view import render_card

CONFIG_ERROR_LOG_TEMPLATE = "ERROR: stats card configuration invalid: {error}"
FAILURE_LOG_TEMPLATE = "ERROR: stats card generation failed ({kind}): {error}"
RENDER_ERROR_TEMPLATE = "Card rendering failed: {error}"
RENDERED_MESSAGE = "Rendered stats card for {login}: rank {rank}, {count} languages"

# This function does run the fetch, aggregate and render steps for one card.
# Renderer exceptions are wrapped in RenderError; UpstreamError propagates.
def render_stats_card(config: CardConfig, github_service: GitHubService) -> str:
    stats = github_service.fetch_profile_stats()
    languages = build_top_languages(stats.repositories, config.ignored_languages)
    rank = calculate_rank(stats.commits, stats.pull_requests)

    try:
        svg = render_card(
            display_name=config.display_name,
            subtitle=config.subtitle,
            rank=rank,
            commits=stats.commits,
            pull_requests=stats.pull_requests,
            languages=languages,
        )
    except Exception as error:
        raise RenderError(RENDER_ERROR_TEMPLATE.format(error=error)) from error

    print(RENDERED_MESSAGE.format(login=config.github_username, rank=rank.label, count=len(languages)))
    return svg

def _error_response(status: int, body: str, error) -> CardResponse:
    return CardResponse(status=status, body=body, content_type=ERROR_CONTENT_TYPE, error=error)

# This function does handle one stats request end-to-end.
# It never calls the service factory when configuration is missing.
def handle_stats_request(
    environ: Mapping[str, str],
    service_factory: Callable[[CardConfig], GitHubService] = GitHubService,
) -> CardResponse:
    try:
        config = load_config(environ)
    except ConfigError as error:
        print(CONFIG_ERROR_LOG_TEMPLATE.format(error=error), file=sys.stderr)
        return _error_response(500, str(error), error)

    try:
        svg = render_stats_card(config, service_factory(config))
    except (UpstreamError, RenderError) as error:
        print(FAILURE_LOG_TEMPLATE.format(kind=type(error).__name__, error=error), file=sys.stderr)
        return _error_response(500, SYSTEM_FAILURE_MESSAGE, error)

    return CardResponse(
        status=200,
        body=svg,
        content_type=CARD_CONTENT_TYPE,
        headers={"Cache-Control": CACHE_CONTROL_HEADER},
    )
