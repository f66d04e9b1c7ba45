import pytest
import requests

from conftest import FakeResponse, make_payload
from stats_card.errors import UpstreamError
from stats_card.services import github_service
from stats_card.services.github_service import GitHubService


@pytest.fixture
def post_calls(monkeypatch):
    calls = []

    def install(response):
        def fake_post(url, **kwargs):
            calls.append((url, kwargs))
            if isinstance(response, Exception):
                raise response
            return response

        monkeypatch.setattr(github_service.requests, "post", fake_post)
        return calls

    return install


def test_fetch_profile_stats_sends_one_graphql_request(card_config, post_calls):
    calls = post_calls(FakeResponse(make_payload(commits=321, pull_requests=12)))

    stats = GitHubService(card_config).fetch_profile_stats()

    assert len(calls) == 1
    url, kwargs = calls[0]
    assert url == "https://api.github.com/graphql"
    assert kwargs["headers"]["Authorization"] == "Bearer secret-token"
    assert kwargs["json"]["variables"] == {"login": "octocat"}
    assert "totalCommitContributions" in kwargs["json"]["query"]
    assert "first: 100" in kwargs["json"]["query"]
    assert "languages(first: 10" in kwargs["json"]["query"]
    assert kwargs["timeout"] == 30

    assert stats.commits == 321
    assert stats.pull_requests == 12
    assert len(stats.repositories) == 2
    assert stats.repositories[1][1].name == "Go"
    assert stats.repositories[1][1].color == "#00ADD8"
    assert stats.repositories[1][1].size == 50


def test_graphql_errors_raise_upstream_error(card_config, post_calls):
    post_calls(FakeResponse({"errors": [{"message": "Bad credentials"}]}))

    with pytest.raises(UpstreamError, match="Bad credentials"):
        GitHubService(card_config).fetch_profile_stats()


def test_transport_failure_raises_upstream_error(card_config, post_calls):
    post_calls(requests.ConnectionError("connection reset"))

    with pytest.raises(UpstreamError, match="connection reset"):
        GitHubService(card_config).fetch_profile_stats()


def test_http_error_status_raises_upstream_error(card_config, post_calls):
    post_calls(FakeResponse({"message": "Bad credentials"}, status_code=401))

    with pytest.raises(UpstreamError):
        GitHubService(card_config).fetch_profile_stats()


def test_invalid_json_raises_upstream_error(card_config, post_calls):
    post_calls(FakeResponse(json_error=ValueError("Expecting value")))

    with pytest.raises(UpstreamError, match="not JSON"):
        GitHubService(card_config).fetch_profile_stats()


def test_missing_user_raises_upstream_error(card_config, post_calls):
    post_calls(FakeResponse({"data": {"user": None}}))

    with pytest.raises(UpstreamError, match="data.user"):
        GitHubService(card_config).fetch_profile_stats()


def test_missing_fields_raise_upstream_error(card_config, post_calls):
    payload = make_payload()
    del payload["data"]["user"]["pullRequests"]
    post_calls(FakeResponse(payload))

    with pytest.raises(UpstreamError):
        GitHubService(card_config).fetch_profile_stats()


def test_repository_without_languages(card_config, post_calls):
    payload = make_payload(repositories=[[]])
    payload["data"]["user"]["repositories"]["nodes"].append({"languages": None})
    post_calls(FakeResponse(payload))

    stats = GitHubService(card_config).fetch_profile_stats()

    assert stats.repositories == [[], []]


def _payload_with_edge(edge):
    payload = make_payload(repositories=[[("Python", "#3572A5", 100)]])
    payload["data"]["user"]["repositories"]["nodes"][0]["languages"]["edges"].append(edge)
    return payload


@pytest.mark.parametrize(
    "edge, field",
    [
        (None, "language edge"),
        ({"size": "n/a", "node": {"name": "Go", "color": "#00ADD8"}}, "language edge"),
        ({"size": 10000, "node": None}, "node.name"),
        ({"size": 10000, "node": {"name": "", "color": None}}, "node.name"),
        ({"node": {"name": "Go", "color": "#00ADD8"}}, "edges.size"),
    ],
)
def test_malformed_language_edge_raises_upstream_error(card_config, post_calls, edge, field):
    post_calls(FakeResponse(_payload_with_edge(edge)))

    with pytest.raises(UpstreamError, match=field):
        GitHubService(card_config).fetch_profile_stats()


def test_language_without_color_is_accepted(card_config, post_calls):
    post_calls(FakeResponse(_payload_with_edge({"size": 5, "node": {"name": "Dockerfile", "color": None}})))

    stats = GitHubService(card_config).fetch_profile_stats()

    assert stats.repositories[0][1].name == "Dockerfile"
    assert stats.repositories[0][1].color is None
