#------------------------------------------------------------
#                          config.py
#   Centralizes environment names, card constants and
#                config loading helpers.

import json
import os
from typing import Mapping, Set
from .errors import ConfigError
from .models import CardConfig

# Environment variable names for configuration
ENV_GITHUB_USERNAME = "GITHUB_USERNAME"
ENV_GITHUB_TOKEN = "GITHUB_TOKEN"
ENV_DISPLAY_NAME = "STATS_CARD_DISPLAY_NAME"
ENV_SUBTITLE = "STATS_CARD_SUBTITLE"
ENV_SERVER_HOST = "STATS_CARD_HOST"
ENV_SERVER_PORT = "STATS_CARD_PORT"
ENV_OUTPUT_PATH = "STATS_CARD_OUTPUT_PATH"

# Default values for configuration parameters
DEFAULT_DISPLAY_NAME = "Genisson Emilio"
DEFAULT_SUBTITLE = "FULL STACK DEVELOPER"
DEFAULT_SERVER_HOST = "127.0.0.1"
DEFAULT_SERVER_PORT = 3000
DEFAULT_TOP_LANGUAGES = 5

# Constants for GitHub GraphQL interaction
GITHUB_GRAPHQL_URL = "https://api.github.com/graphql"
GITHUB_REQUEST_TIMEOUT_SECONDS = 30
GITHUB_REPOSITORY_LIMIT = 100
GITHUB_LANGUAGES_PER_REPOSITORY = 10

# Constants for the HTTP response
STATS_ROUTE = "/api/stats"
CARD_CONTENT_TYPE = "image/svg+xml"
ERROR_CONTENT_TYPE = "text/plain; charset=utf-8"
CACHE_CONTROL_HEADER = "public, max-age=3600, s-maxage=3600"
SYSTEM_FAILURE_MESSAGE = "System Failure"
MISSING_ENV_MESSAGE_TEMPLATE = "Missing environment variables: {names}"

# Icon CDN used for language rows.
ICON_URL_TEMPLATE = "https://cdn.jsdelivr.net/gh/devicons/devicon/icons/{slug}/{slug}-original.svg"
FALLBACK_LANGUAGE_COLOR = "#ccc"

# Directory paths for the project and configuration files.
SCRIPTS_DIR = os.path.dirname(os.path.dirname(__file__))
ROOT_DIR = os.path.dirname(SCRIPTS_DIR)
CONFIG_DIR = os.path.join(SCRIPTS_DIR, "config")
IGNORE_LANGUAGES_PATH = os.path.join(CONFIG_DIR, "language_ignore_list.json")
DEFAULT_OUTPUT_PATH = os.path.join(ROOT_DIR, "output", "stats-card.svg")

# This function does load JSON content from disk safely.
# It returns None when the file is missing or invalid.
def _load_json(path: str):
    if not os.path.exists(path):
        return None
    try:
        with open(path, "r", encoding="utf-8") as file_handle:
            return json.load(file_handle)
    except (OSError, ValueError):
        return None

# This function does load the language ignore list.
# It returns normalized lowercase language names as a set.
def load_ignored_languages(path: str = IGNORE_LANGUAGES_PATH) -> Set[str]:
    data = _load_json(path)
    if not isinstance(data, list):
        return set()
    return {str(item).strip().lower() for item in data if str(item).strip()}

# This function does build the card configuration from an environment mapping.
# It raises ConfigError naming every required value that is missing.
def load_config(environ: Mapping[str, str], ignore_languages_path: str = IGNORE_LANGUAGES_PATH) -> CardConfig:
    username = (environ.get(ENV_GITHUB_USERNAME) or "").strip()
    token = (environ.get(ENV_GITHUB_TOKEN) or "").strip()

    missing = [
        name
        for name, value in ((ENV_GITHUB_USERNAME, username), (ENV_GITHUB_TOKEN, token))
        if not value
    ]
    if missing:
        raise ConfigError(MISSING_ENV_MESSAGE_TEMPLATE.format(names=", ".join(missing)))

    return CardConfig(
        github_username=username,
        github_token=token,
        display_name=(environ.get(ENV_DISPLAY_NAME) or "").strip() or DEFAULT_DISPLAY_NAME,
        subtitle=(environ.get(ENV_SUBTITLE) or "").strip() or DEFAULT_SUBTITLE,
        ignored_languages=load_ignored_languages(ignore_languages_path),
    )
