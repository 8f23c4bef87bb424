"""Rank repositories by commit activity and total their stars"""

from typing import Optional

from annual_review.models import Repository


def summarize_repository(node) -> Repository:
    """Flatten a fetched RepositoryNode into the review's Repository"""
    return Repository(
        name=node.name,
        url=node.url,
        description=node.description,
        stars=node.star_count,
        forks=node.fork_count,
        language=node.primary_language,
        commits=node.commit_count or 0
    )


def summarize_repositories(repositories) -> list:
    """Full repository list in server order"""
    return [summarize_repository(node) for node in repositories]


def find_most_active_repo(repositories) -> Optional[Repository]:
    """
    Repository with the most default-branch commits in the queried window

    Repositories without a default branch count as 0 commits. On ties the
    first repository wins. Returns None when there are no repositories.
    """
    most_active = None
    most_commits = 0

    for node in repositories:
        commits = node.commit_count or 0
        if most_active is None or commits > most_commits:
            most_active = node
            most_commits = commits

    if most_active is None:
        return None
    return summarize_repository(most_active)


def calculate_total_stars(repositories) -> int:
    return sum(node.star_count for node in repositories)
