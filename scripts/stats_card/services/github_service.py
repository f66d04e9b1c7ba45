#------------------------------------------------------------
#                      github_service.py
#            Handles the GitHub GraphQL request and
#                      response shaping.

from typing import Dict, List
import requests
from ..config import (
    GITHUB_GRAPHQL_URL,
    GITHUB_LANGUAGES_PER_REPOSITORY,
    GITHUB_REPOSITORY_LIMIT,
    GITHUB_REQUEST_TIMEOUT_SECONDS,
)
from ..errors import UpstreamError
from ..models import CardConfig, LanguageEdge, ProfileStats

PROFILE_STATS_QUERY = """
query userInfo($login: String!) {
  user(login: $login) {
    contributionsCollection {
      totalCommitContributions
    }
    pullRequests(first: 1) {
      totalCount
    }
    repositories(ownerAffiliations: OWNER, isFork: false, first: %(repositories)d, orderBy: {field: UPDATED_AT, direction: DESC}) {
      nodes {
        languages(first: %(languages)d, orderBy: {field: SIZE, direction: DESC}) {
          edges {
            size
            node {
              color
              name
            }
          }
        }
      }
    }
  }
}
""" % {"repositories": GITHUB_REPOSITORY_LIMIT, "languages": GITHUB_LANGUAGES_PER_REPOSITORY}

FETCH_MESSAGE = "Fetching profile stats for {login}"
REPOSITORY_RESULT_MESSAGE = "Found {count} repositories for {login}"
TRANSPORT_ERROR_TEMPLATE = "GitHub GraphQL request failed: {error}"
DECODE_ERROR_TEMPLATE = "GitHub GraphQL response is not JSON: {error}"
GRAPHQL_ERROR_TEMPLATE = "GitHub GraphQL errors: {errors}"
MALFORMED_PAYLOAD_TEMPLATE = "GitHub GraphQL payload is missing {field}"

class GitHubService:

    # This function does store runtime configuration used by API methods.
    def __init__(self, config: CardConfig):
        self.config = config

    # This function does build request headers for the GraphQL call.
    def headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self.config.github_token}",
            "Content-Type": "application/json",
        }

    # This function does issue the single GraphQL request for the user.
    # It raises UpstreamError for transport, HTTP and GraphQL failures alike.
    def fetch_profile_stats(self) -> ProfileStats:
        login = self.config.github_username
        print(FETCH_MESSAGE.format(login=login))

        payload = {"query": PROFILE_STATS_QUERY, "variables": {"login": login}}
        try:
            response = requests.post(
                GITHUB_GRAPHQL_URL,
                json=payload,
                headers=self.headers(),
                timeout=GITHUB_REQUEST_TIMEOUT_SECONDS,
            )
            response.raise_for_status()
        except requests.RequestException as error:
            raise UpstreamError(TRANSPORT_ERROR_TEMPLATE.format(error=error)) from error

        try:
            data = response.json()
        except ValueError as error:
            raise UpstreamError(DECODE_ERROR_TEMPLATE.format(error=error)) from error

        if not isinstance(data, dict):
            raise UpstreamError(MALFORMED_PAYLOAD_TEMPLATE.format(field="data"))
        if data.get("errors"):
            raise UpstreamError(GRAPHQL_ERROR_TEMPLATE.format(errors=data["errors"]))

        stats = self._parse_profile_stats(data)
        print(REPOSITORY_RESULT_MESSAGE.format(count=len(stats.repositories), login=login))
        return stats

    # This function does shape the raw GraphQL payload into ProfileStats.
    # Missing fields are reported as an UpstreamError naming the path.
    @staticmethod
    def _parse_profile_stats(data: dict) -> ProfileStats:
        user = (data.get("data") or {}).get("user")
        if not isinstance(user, dict):
            raise UpstreamError(MALFORMED_PAYLOAD_TEMPLATE.format(field="data.user"))

        try:
            commits = int(user["contributionsCollection"]["totalCommitContributions"])
            pull_requests = int(user["pullRequests"]["totalCount"])
            nodes = user["repositories"]["nodes"] or []
        except (KeyError, TypeError, ValueError) as error:
            raise UpstreamError(MALFORMED_PAYLOAD_TEMPLATE.format(field=error)) from error

        repositories: List[List[LanguageEdge]] = []
        try:
            for node in nodes:
                edges = ((node or {}).get("languages") or {}).get("edges") or []
                repositories.append([GitHubService._parse_language_edge(edge) for edge in edges])
        except (AttributeError, KeyError, TypeError, ValueError) as error:
            raise UpstreamError(MALFORMED_PAYLOAD_TEMPLATE.format(field=f"a valid language edge ({error})")) from error

        return ProfileStats(commits=commits, pull_requests=pull_requests, repositories=repositories)

    # This function does convert one language edge into a LanguageEdge.
    # A missing size or language name is an UpstreamError; a null colour is allowed.
    @staticmethod
    def _parse_language_edge(edge: dict) -> LanguageEdge:
        node = edge.get("node")
        if not isinstance(node, dict) or not node.get("name"):
            raise UpstreamError(MALFORMED_PAYLOAD_TEMPLATE.format(field="languages.edges.node.name"))
        if edge.get("size") is None:
            raise UpstreamError(MALFORMED_PAYLOAD_TEMPLATE.format(field="languages.edges.size"))
        return LanguageEdge(size=int(edge["size"]), name=node["name"], color=node.get("color"))
