#!/usr/bin/env python3
"""
Render the GitHub stats card once and write it to disk.

Usage:
  render_card.py [output_path]

The output path defaults to STATS_CARD_OUTPUT_PATH, then output/stats-card.svg.
Requires GITHUB_USERNAME and GITHUB_TOKEN like the HTTP endpoint.
"""

import os
import sys

from stats_card.config import DEFAULT_OUTPUT_PATH, ENV_OUTPUT_PATH, load_config
from stats_card.controller import render_stats_card
from stats_card.errors import StatsCardError
from stats_card.services.github_service import GitHubService


def save_card(path, content):
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(path, "w", encoding="utf-8") as fh:
        fh.write(content)


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    output_path = argv[0] if argv else os.environ.get(ENV_OUTPUT_PATH, DEFAULT_OUTPUT_PATH)

    try:
        config = load_config(os.environ)
        svg = render_stats_card(config, GitHubService(config))
    except StatsCardError as error:
        print(f"ERROR: {error}", file=sys.stderr)
        return 1

    save_card(output_path, svg)
    print(f"Stats card written to {output_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
