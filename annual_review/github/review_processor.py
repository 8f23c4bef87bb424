"""Assemble the annual review from the fetched activity graph and commit messages"""

import argparse
import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import replace
from datetime import date

from annual_review.config import REVIEW_EXPORTS_DIR, get_github_token
from annual_review.errors import AuthenticationError
from annual_review.exporter import ReviewExporter
from annual_review.github.calendar_processor import calculate_monthly_contributions, find_busiest_day
from annual_review.github.commit_processor import analyze_commit_messages
from annual_review.github.language_processor import calculate_language_stats
from annual_review.github.repository_processor import (
    calculate_total_stars,
    find_most_active_repo,
    summarize_repositories,
)
from annual_review.github.review_fetcher import ReviewFetcher
from annual_review.models import AnnualReviewSummary

logger = logging.getLogger(__name__)


def year_window(year: int) -> tuple:
    """Start and end timestamps of a calendar year"""
    return f"{year}-01-01T00:00:00Z", f"{year}-12-31T23:59:59Z"


def compute_annual_review(year: int, user, graph, commits=None) -> AnnualReviewSummary:
    """
    Reduce one fetched activity graph into the annual review

    Args:
        year: Reviewed year
        user: UserProfile of the reviewed user
        graph: ActivityGraph for the year
        commits: Sequence of CommitRecord, or None when messages are unavailable

    Returns:
        AnnualReviewSummary (commit_insights is None when commits is None)
    """
    repositories = graph.repositories

    commit_insights = None
    if commits is not None:
        commit_insights = analyze_commit_messages([commit.message for commit in commits])

    return AnnualReviewSummary(
        year=year,
        user=user,
        total_commits=graph.totals.commits,
        total_prs=graph.totals.pull_requests,
        total_issues=graph.totals.issues,
        total_stars=calculate_total_stars(repositories),
        new_followers=graph.follower_count,
        most_active_repo=find_most_active_repo(repositories),
        top_languages=tuple(calculate_language_stats(repositories)),
        busiest_day=find_busiest_day(graph.calendar),
        contribution_calendar=graph.calendar,
        repositories=tuple(summarize_repositories(repositories)),
        monthly_contributions=tuple(calculate_monthly_contributions(graph.calendar)),
        commit_insights=commit_insights
    )


class ReviewAssembler:
    """Fetches everything a review needs and computes it"""

    def __init__(self, fetcher):
        """
        Args:
            fetcher: Object with fetch_profile, fetch_activity_graph and
                fetch_commit_messages (see ReviewFetcher)
        """
        self.fetcher = fetcher

    def build(self, year: int = None) -> AnnualReviewSummary:
        """
        Build the annual review of the token owner

        Profile and activity graph failures propagate. A failed commit
        message fetch only drops the commit insights.
        """
        if year is None:
            year = date.today().year

        user = self.fetcher.fetch_profile()
        year_start, year_end = year_window(year)

        with ThreadPoolExecutor(max_workers=2) as executor:
            graph_future = executor.submit(
                self.fetcher.fetch_activity_graph, user.login, year_start, year_end
            )
            commits_future = executor.submit(
                self.fetcher.fetch_commit_messages, user.login, year_start, year_end
            )
            graph = graph_future.result()
            commits = self._collect_commits(commits_future)

        summary = compute_annual_review(year, user, graph)

        if commits is not None:
            try:
                insights = analyze_commit_messages([commit.message for commit in commits])
            except Exception as e:
                logger.warning("Failed to analyze commit messages for %s: %s", user.login, e)
            else:
                summary = replace(summary, commit_insights=insights)

        logger.info("Built %d annual review for %s", year, user.login)
        return summary

    def _collect_commits(self, future):
        try:
            return future.result()
        except Exception as e:
            logger.warning("Failed to get commit insights: %s", e)
            return None


def main():
    parser = argparse.ArgumentParser(description="Build a GitHub annual review")
    parser.add_argument("--year", type=int, default=date.today().year, help="Year to review (defaults to the current year)")
    parser.add_argument("--no-cache", action="store_true", help="Don't use cached data")
    parser.add_argument("--output", default=str(REVIEW_EXPORTS_DIR), help="Directory for the exported JSON and CSV")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    token = get_github_token()

    if not token:
        raise AuthenticationError("GITHUB_TOKEN environment variable not set")

    fetcher = ReviewFetcher(token, use_cache=not args.no_cache)
    summary = ReviewAssembler(fetcher).build(args.year)

    print(f"\n{summary.user.login}'s {summary.year} on GitHub")
    print(f"  Commits: {summary.total_commits}  PRs: {summary.total_prs}  Issues: {summary.total_issues}")
    print(f"  Stars: {summary.total_stars}  Followers: {summary.new_followers}")
    if summary.busiest_day:
        print(f"  Busiest day: {summary.busiest_day.date} ({summary.busiest_day.contributions} contributions)")
    if summary.most_active_repo:
        print(f"  Most active repository: {summary.most_active_repo.name}")
    if summary.top_languages:
        print("  Top languages: " + ", ".join(lang.name for lang in summary.top_languages[:5]))

    exporter = ReviewExporter(args.output)
    json_file = exporter.export_json(summary)
    csv_file = exporter.export_monthly_csv(summary)
    print(f"\nExported review to {json_file} and {csv_file}")


if __name__ == "__main__":
    main()
