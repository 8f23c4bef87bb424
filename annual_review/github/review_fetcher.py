"""Fetch profile, activity graph and commit messages from GitHub"""

import json
import logging
from pathlib import Path

import requests
from github import Auth, BadCredentialsException, Github, GithubException

from annual_review.config import (
    COMMIT_MESSAGE_REPOSITORIES,
    COMMITS_PER_REPOSITORY,
    GITHUB_GRAPHQL_URL,
    LANGUAGES_PER_REPOSITORY,
    REQUEST_TIMEOUT,
    REVIEW_CACHE_DIR,
    REVIEW_REPOSITORY_LIMIT,
)
from annual_review.errors import (
    AuthenticationError,
    DataShapeError,
    GraphQueryError,
    TransportError,
)
from annual_review.models import ActivityGraph, CommitRecord, UserProfile

logger = logging.getLogger(__name__)

# GraphQL query for the yearly contributions, owned repositories and followers
ACTIVITY_GRAPH_QUERY = """
query($username: String!, $from: DateTime!, $to: DateTime!, $since: GitTimestamp!, $until: GitTimestamp!,
      $repoLimit: Int!, $languageLimit: Int!) {
  user(login: $username) {
    contributionsCollection(from: $from, to: $to) {
      contributionCalendar {
        totalContributions
        weeks {
          contributionDays {
            date
            contributionCount
            color
            contributionLevel
          }
        }
      }
      totalCommitContributions
      totalPullRequestContributions
      totalIssueContributions
      totalRepositoryContributions
      restrictedContributionsCount
    }
    repositories(first: $repoLimit, orderBy: {field: PUSHED_AT, direction: DESC}, ownerAffiliations: OWNER) {
      nodes {
        name
        description
        url
        stargazerCount
        forkCount
        primaryLanguage {
          name
          color
        }
        languages(first: $languageLimit, orderBy: {field: SIZE, direction: DESC}) {
          edges {
            size
            node {
              name
              color
            }
          }
        }
        defaultBranchRef {
          target {
            ... on Commit {
              history(since: $since, until: $until) {
                totalCount
              }
            }
          }
        }
      }
    }
    followers {
      totalCount
    }
  }
}
"""

# GraphQL query for recent commit messages of the most recently pushed repositories
COMMIT_MESSAGES_QUERY = """
query($username: String!, $since: GitTimestamp!, $until: GitTimestamp!, $repoLimit: Int!, $commitLimit: Int!) {
  user(login: $username) {
    repositories(first: $repoLimit, orderBy: {field: PUSHED_AT, direction: DESC}, ownerAffiliations: OWNER) {
      nodes {
        name
        defaultBranchRef {
          target {
            ... on Commit {
              history(first: $commitLimit, since: $since, until: $until) {
                nodes {
                  message
                  committedDate
                }
              }
            }
          }
        }
      }
    }
  }
}
"""


class GraphQLClient:
    """Simple GitHub GraphQL client"""

    def __init__(self, token: str):
        self.token = token
        self.headers = {
            "Authorization": f"Bearer {token}",
            "Content-Type": "application/json"
        }

    def execute(self, query: str, variables: dict) -> dict:
        """Execute a GraphQL query and return its `data`"""
        try:
            response = requests.post(
                GITHUB_GRAPHQL_URL,
                headers=self.headers,
                json={"query": query, "variables": variables},
                timeout=REQUEST_TIMEOUT
            )
        except requests.RequestException as e:
            raise TransportError(f"GitHub API unreachable: {e}") from e

        if response.status_code == 401:
            raise AuthenticationError("GitHub rejected the token")
        if not response.ok:
            raise TransportError(
                f"GitHub API error: {response.status_code} {response.reason}",
                status_code=response.status_code
            )

        try:
            result = response.json()
        except ValueError as e:
            raise TransportError(
                "GitHub API returned invalid JSON",
                status_code=response.status_code
            ) from e

        if result.get("errors"):
            raise GraphQueryError(result["errors"])

        return result.get("data") or {}


class ReviewFetcher:
    """Fetches the data an annual review is built from"""

    def __init__(self, token: str, use_cache: bool = False, cache_dir: Path = REVIEW_CACHE_DIR):
        """
        Args:
            token: GitHub personal access token
            use_cache: Reuse raw GraphQL responses stored under cache_dir
            cache_dir: Directory for the per-user response cache
        """
        self.token = token
        self.client = GraphQLClient(token)
        self.github = Github(auth=Auth.Token(token)) if token else None
        self.use_cache = use_cache
        self.cache_dir = Path(cache_dir)

    def fetch_profile(self) -> UserProfile:
        """Profile of the token owner"""
        if self.github is None:
            raise AuthenticationError("GitHub token not set")

        try:
            # Attributes are loaded lazily, the request happens here
            return UserProfile.from_github(self.github.get_user())
        except BadCredentialsException as e:
            raise AuthenticationError("GitHub rejected the token") from e
        except GithubException as e:
            raise TransportError(f"GitHub API error: {e}", status_code=e.status) from e
        except requests.RequestException as e:
            raise TransportError(f"GitHub API unreachable: {e}") from e

    def validate_token(self) -> bool:
        """Whether the token can read the user profile"""
        try:
            self.fetch_profile()
        except (AuthenticationError, TransportError):
            return False
        return True

    def fetch_activity_graph(self, username: str, year_start: str, year_end: str) -> ActivityGraph:
        """
        Fetch the composite activity graph for a time window

        Args:
            username: GitHub login
            year_start: ISO timestamp of the window start
            year_end: ISO timestamp of the window end
        """
        logger.info("Fetching activity graph for %s (%s - %s)", username, year_start, year_end)
        variables = {
            "username": username,
            "from": year_start,
            "to": year_end,
            "since": year_start,
            "until": year_end,
            "repoLimit": REVIEW_REPOSITORY_LIMIT,
            "languageLimit": LANGUAGES_PER_REPOSITORY
        }
        data = self._execute_cached("graph", username, year_start, year_end, ACTIVITY_GRAPH_QUERY, variables)
        graph = ActivityGraph.from_graphql(data.get("user"))
        logger.info("Fetched %d repositories for %s", len(graph.repositories), username)
        return graph

    def fetch_commit_messages(self, username: str, year_start: str, year_end: str) -> list:
        """
        Fetch recent commit messages from the user's most recently pushed repositories

        Returns:
            List of CommitRecord, empty messages skipped
        """
        logger.info("Fetching commit messages for %s", username)
        variables = {
            "username": username,
            "since": year_start,
            "until": year_end,
            "repoLimit": COMMIT_MESSAGE_REPOSITORIES,
            "commitLimit": COMMITS_PER_REPOSITORY
        }
        data = self._execute_cached("commits", username, year_start, year_end, COMMIT_MESSAGES_QUERY, variables)

        user = data.get("user")
        if not user:
            raise DataShapeError("Commit message response has no user")

        commits = []
        for repo in (user.get("repositories") or {}).get("nodes") or []:
            branch = (repo or {}).get("defaultBranchRef")
            if not branch:
                continue
            history = (branch.get("target") or {}).get("history") or {}
            for node in history.get("nodes") or []:
                if node.get("message"):
                    commits.append(CommitRecord(
                        message=node["message"],
                        committed_date=node.get("committedDate") or ""
                    ))

        logger.info("Fetched %d commit messages for %s", len(commits), username)
        return commits

    def _execute_cached(self, kind: str, username: str, year_start: str, year_end: str,
                        query: str, variables: dict) -> dict:
        """Run a query, reading and writing the response cache when enabled"""
        cache_file = self.cache_dir / username / f"{kind}_{year_start[:10]}_{year_end[:10]}.json"

        if self.use_cache and cache_file.exists():
            logger.info("Loading %s from cache %s", kind, cache_file)
            with open(cache_file) as f:
                return json.load(f)

        data = self.client.execute(query, variables)

        if self.use_cache:
            cache_file.parent.mkdir(parents=True, exist_ok=True)
            with open(cache_file, "w") as f:
                json.dump(data, f)

        return data
