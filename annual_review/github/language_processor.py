"""Aggregate repository language sizes into top languages"""

from annual_review.config import DEFAULT_LANGUAGE_COLOR, TOP_LANGUAGES_LIMIT
from annual_review.models import LanguageStat


def calculate_language_stats(repositories, limit: int = TOP_LANGUAGES_LIMIT) -> list:
    """
    Merge language edges of all repositories into a ranked list

    Args:
        repositories: Sequence of RepositoryNode
        limit: Maximum number of languages to keep

    Returns:
        List of LanguageStat sorted by size, largest first
    """
    languages = {}  # {name: {"size": int, "color": str}}

    for repo in repositories:
        for edge in repo.languages:
            if edge.name in languages:
                languages[edge.name]["size"] += edge.size
            else:
                languages[edge.name] = {
                    "size": edge.size,
                    "color": edge.color or DEFAULT_LANGUAGE_COLOR
                }

    total_size = sum(lang["size"] for lang in languages.values())

    stats = [
        LanguageStat(
            name=name,
            size=lang["size"],
            color=lang["color"],
            percentage=(lang["size"] / total_size) * 100 if total_size > 0 else 0
        )
        for name, lang in languages.items()
    ]
    stats.sort(key=lambda stat: stat.size, reverse=True)

    return stats[:limit]
