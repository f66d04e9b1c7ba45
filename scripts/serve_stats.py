#!/usr/bin/env python3
"""
Serve the GitHub stats card over HTTP.

Endpoint:
  GET /api/stats -> SVG card (200) or plain-text error (500)

Environment variables:
  GITHUB_USERNAME: GitHub login whose stats are rendered (required)
  GITHUB_TOKEN: Personal access token used for the GraphQL API (required)
  STATS_CARD_DISPLAY_NAME: Name shown in the card header
  STATS_CARD_SUBTITLE: Line shown under the name
  STATS_CARD_HOST / STATS_CARD_PORT: Bind address (default 127.0.0.1:3000)
"""

import os

from stats_card.app import create_app
from stats_card.config import DEFAULT_SERVER_HOST, DEFAULT_SERVER_PORT, ENV_SERVER_HOST, ENV_SERVER_PORT


def main():
    host = os.environ.get(ENV_SERVER_HOST, DEFAULT_SERVER_HOST)
    port = int(os.environ.get(ENV_SERVER_PORT, DEFAULT_SERVER_PORT))
    create_app().run(host=host, port=port)


if __name__ == "__main__":
    main()
