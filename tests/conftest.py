import pytest
import requests

from stats_card.models import CardConfig


def make_payload(commits=120, pull_requests=10, repositories=None):
    if repositories is None:
        repositories = [
            [("Python", "#3572A5", 100)],
            [("Python", "#3572A5", 50), ("Go", "#00ADD8", 50)],
        ]
    return {
        "data": {
            "user": {
                "contributionsCollection": {"totalCommitContributions": commits},
                "pullRequests": {"totalCount": pull_requests},
                "repositories": {
                    "nodes": [
                        {
                            "languages": {
                                "edges": [
                                    {"size": size, "node": {"name": name, "color": color}}
                                    for name, color, size in edges
                                ]
                            }
                        }
                        for edges in repositories
                    ]
                },
            }
        }
    }


class FakeResponse:
    def __init__(self, payload=None, status_code=200, json_error=None):
        self.payload = payload
        self.status_code = status_code
        self.json_error = json_error

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")

    def json(self):
        if self.json_error is not None:
            raise self.json_error
        return self.payload


@pytest.fixture
def card_config():
    return CardConfig(
        github_username="octocat",
        github_token="secret-token",
        display_name="Mona Lisa",
        subtitle="FULL STACK DEVELOPER",
    )


@pytest.fixture
def environ():
    return {"GITHUB_USERNAME": "octocat", "GITHUB_TOKEN": "secret-token"}
