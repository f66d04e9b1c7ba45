import json

import pytest

from stats_card.config import load_config, load_ignored_languages
from stats_card.errors import ConfigError


def test_load_config_defaults(environ, tmp_path):
    config = load_config(environ, ignore_languages_path=str(tmp_path / "missing.json"))

    assert config.github_username == "octocat"
    assert config.github_token == "secret-token"
    assert config.display_name == "Genisson Emilio"
    assert config.subtitle == "FULL STACK DEVELOPER"
    assert config.ignored_languages == set()


def test_load_config_overrides(environ, tmp_path):
    environ.update({"STATS_CARD_DISPLAY_NAME": "Mona Lisa", "STATS_CARD_SUBTITLE": "OPEN SOURCE"})

    config = load_config(environ, ignore_languages_path=str(tmp_path / "missing.json"))

    assert config.display_name == "Mona Lisa"
    assert config.subtitle == "OPEN SOURCE"


def test_load_config_names_every_missing_value():
    with pytest.raises(ConfigError) as excinfo:
        load_config({"GITHUB_USERNAME": "  "})

    assert str(excinfo.value) == "Missing environment variables: GITHUB_USERNAME, GITHUB_TOKEN"


def test_load_ignored_languages(tmp_path):
    path = tmp_path / "language_ignore_list.json"
    path.write_text(json.dumps(["HTML", " Jupyter Notebook ", ""]), encoding="utf-8")

    assert load_ignored_languages(str(path)) == {"html", "jupyter notebook"}


def test_load_ignored_languages_invalid_file(tmp_path):
    path = tmp_path / "language_ignore_list.json"
    path.write_text("{not json", encoding="utf-8")

    assert load_ignored_languages(str(path)) == set()
