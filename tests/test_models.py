"""Tests for parsing the activity graph"""

import copy
import unittest

from annual_review.errors import DataShapeError
from annual_review.models import (
    ActivityGraph,
    BusiestDay,
    CommitRecord,
    CommitType,
    LanguageStat,
    MonthlyContribution,
    Repository,
    UserProfile,
    WordFrequency,
)


USER_PAYLOAD = {
    "contributionsCollection": {
        "contributionCalendar": {
            "totalContributions": 5,
            "weeks": [
                {"contributionDays": [
                    {"date": "2024-01-01", "contributionCount": 2, "color": "#40c463",
                     "contributionLevel": "SECOND_QUARTILE"},
                    {"date": "2024-01-02", "contributionCount": 3, "color": "#30a14e",
                     "contributionLevel": "THIRD_QUARTILE"},
                ]}
            ]
        },
        "totalCommitContributions": 4,
        "totalPullRequestContributions": 1,
        "totalIssueContributions": 0,
        "totalRepositoryContributions": 2,
        "restrictedContributionsCount": 7
    },
    "repositories": {
        "nodes": [
            {
                "name": "wrapped",
                "description": "Year in review",
                "url": "https://github.com/octocat/wrapped",
                "stargazerCount": 12,
                "forkCount": 1,
                "primaryLanguage": {"name": "Python", "color": "#3572A5"},
                "languages": {"edges": [
                    {"size": 1200, "node": {"name": "Python", "color": "#3572A5"}},
                    {"size": 40, "node": {"name": "Dockerfile", "color": None}},
                ]},
                "defaultBranchRef": {"target": {"history": {"totalCount": 42}}}
            },
            {
                "name": "empty",
                "description": None,
                "url": "https://github.com/octocat/empty",
                "stargazerCount": 0,
                "forkCount": 0,
                "primaryLanguage": None,
                "languages": {"edges": []},
                "defaultBranchRef": None
            }
        ]
    },
    "followers": {"totalCount": 8}
}


class TestActivityGraph(unittest.TestCase):
    """Test GraphQL parsing"""

    def test_parse_full_payload(self):
        graph = ActivityGraph.from_graphql(USER_PAYLOAD)

        self.assertEqual(graph.calendar.total_contributions, 5)
        self.assertEqual(len(list(graph.calendar.iter_days())), 2)
        self.assertEqual(graph.calendar.weeks[0].days[1].level, "THIRD_QUARTILE")
        self.assertEqual(graph.totals.commits, 4)
        self.assertEqual(graph.totals.pull_requests, 1)
        self.assertEqual(graph.totals.restricted, 7)
        self.assertEqual(graph.follower_count, 8)

        wrapped = graph.repositories[0]
        self.assertEqual(wrapped.star_count, 12)
        self.assertEqual(wrapped.primary_language, "Python")
        self.assertEqual(wrapped.commit_count, 42)
        self.assertEqual(wrapped.languages[1].name, "Dockerfile")
        self.assertIsNone(wrapped.languages[1].color)

    def test_missing_default_branch(self):
        """Test a repository without default branch has no commit count"""
        empty = ActivityGraph.from_graphql(USER_PAYLOAD).repositories[1]

        self.assertIsNone(empty.commit_count)
        self.assertIsNone(empty.primary_language)
        self.assertEqual(empty.languages, ())

    def test_missing_user(self):
        with self.assertRaises(DataShapeError):
            ActivityGraph.from_graphql(None)

    def test_missing_contributions(self):
        with self.assertRaises(DataShapeError):
            ActivityGraph.from_graphql({"repositories": {"nodes": []}})

    def test_day_without_date(self):
        """Test a calendar day without a date is a shape error"""
        payload = copy.deepcopy(USER_PAYLOAD)
        del payload["contributionsCollection"]["contributionCalendar"]["weeks"][0]["contributionDays"][0]["date"]

        with self.assertRaises(DataShapeError):
            ActivityGraph.from_graphql(payload)

    def test_repository_without_name(self):
        """Test a repository without a name is a shape error"""
        payload = copy.deepcopy(USER_PAYLOAD)
        del payload["repositories"]["nodes"][1]["name"]

        with self.assertRaises(DataShapeError):
            ActivityGraph.from_graphql(payload)


class TestOtherModels(unittest.TestCase):

    def test_commit_title(self):
        self.assertEqual(CommitRecord(message="chore: bump\n\nSigned-off-by: x").title, "chore: bump")

    def test_profile_from_dict(self):
        profile = UserProfile.from_dict({"login": "octocat", "followers": 3, "unknown_field": True})

        self.assertEqual(profile.login, "octocat")
        self.assertEqual(profile.followers, 3)

    def test_profile_without_login(self):
        with self.assertRaises(DataShapeError):
            UserProfile.from_dict({"name": "No Login"})

    def test_derived_records_to_dict(self):
        """Test every derived record serializes on its own"""
        records = [
            (LanguageStat(name="Python", size=10, color="#3572A5", percentage=100.0),
             {"name": "Python", "size": 10, "color": "#3572A5", "percentage": 100.0}),
            (BusiestDay(date="2024-07-19", contributions=12),
             {"date": "2024-07-19", "contributions": 12}),
            (MonthlyContribution(month="Jul", commits=30),
             {"month": "Jul", "commits": 30, "prs": 0, "issues": 0}),
            (Repository(name="wrapped", url="https://github.com/octocat/wrapped", description=None,
                        stars=1, forks=0, language="Python", commits=4),
             {"name": "wrapped", "url": "https://github.com/octocat/wrapped", "description": None,
              "stars": 1, "forks": 0, "language": "Python", "commits": 4}),
            (WordFrequency(word="login", count=2, percentage=50.0),
             {"word": "login", "count": 2, "percentage": 50.0}),
            (CommitType(type="Fix", count=3, color="#f85149"),
             {"type": "Fix", "count": 3, "color": "#f85149"}),
        ]

        for record, expected in records:
            self.assertEqual(record.to_dict(), expected)


if __name__ == "__main__":
    unittest.main()
