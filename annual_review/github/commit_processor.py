"""Analyze commit messages: word frequency and conventional commit types"""

import math
import re
from collections import Counter

from annual_review.config import (
    LONGEST_MESSAGE_LENGTH,
    OTHER_COMMIT_TYPE_COLOR,
    TOP_WORDS_LIMIT,
)
from annual_review.models import CommitInsights, CommitType, WordFrequency


# Common words excluded from word frequency
STOP_WORDS = frozenset([
    "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for", "of", "with",
    "by", "from", "as", "is", "was", "are", "were", "been", "be", "have", "has", "had",
    "do", "does", "did", "will", "would", "could", "should", "may", "might", "must",
    "shall", "can", "need", "dare", "ought", "used", "it", "its", "this", "that",
    "these", "those", "i", "you", "he", "she", "we", "they", "what", "which", "who",
    "when", "where", "why", "how", "all", "each", "every", "both", "few", "more",
    "most", "other", "some", "such", "no", "nor", "not", "only", "own", "same", "so",
    "than", "too", "very", "just", "into", "over", "after", "before", "between",
    "through", "during", "above", "below", "up", "down", "out", "off", "about", "if",
])

# Evaluated in order, first match wins ("feat: add x" is a Feature, not an Add)
COMMIT_TYPE_PATTERNS = (
    (re.compile(r"^feat", re.IGNORECASE), "Feature", "#238636"),
    (re.compile(r"^fix", re.IGNORECASE), "Fix", "#f85149"),
    (re.compile(r"^docs", re.IGNORECASE), "Docs", "#58a6ff"),
    (re.compile(r"^style", re.IGNORECASE), "Style", "#f778ba"),
    (re.compile(r"^refactor", re.IGNORECASE), "Refactor", "#8957e5"),
    (re.compile(r"^test", re.IGNORECASE), "Test", "#e3b341"),
    (re.compile(r"^chore", re.IGNORECASE), "Chore", "#8b949e"),
    (re.compile(r"^(add|create|implement)", re.IGNORECASE), "Add", "#238636"),
    (re.compile(r"^(update|change|modify)", re.IGNORECASE), "Update", "#58a6ff"),
    (re.compile(r"^(remove|delete)", re.IGNORECASE), "Remove", "#f85149"),
    (re.compile(r"^(merge|pull)", re.IGNORECASE), "Merge", "#8957e5"),
    (re.compile(r"^(init|initial)", re.IGNORECASE), "Init", "#39d353"),
)

OTHER_COMMIT_TYPE = "Other"

_NON_WORD_CHARS = re.compile(r"[^a-z0-9\s]")


def commit_title(message: str) -> str:
    """First line of a commit message"""
    return message.split("\n")[0]


def extract_words(title: str) -> list:
    """Lowercased words of a title, without punctuation, short words and stop words"""
    cleaned = _NON_WORD_CHARS.sub(" ", title.lower())
    return [word for word in cleaned.split() if len(word) > 2 and word not in STOP_WORDS]


def classify_commit(title: str) -> tuple:
    """
    Conventional commit type of a title

    Returns:
        (type, color) of the first matching pattern, or the "Other" type
    """
    for pattern, commit_type, color in COMMIT_TYPE_PATTERNS:
        if pattern.match(title):
            return commit_type, color
    return OTHER_COMMIT_TYPE, OTHER_COMMIT_TYPE_COLOR


def analyze_commit_messages(messages) -> CommitInsights:
    """
    Build commit insights from raw commit messages

    Args:
        messages: Sequence of commit message strings

    Returns:
        CommitInsights with the top words and commit type breakdown
    """
    messages = list(messages)
    word_counts = Counter()
    type_counts = {}  # {type: {"count": int, "color": str}}
    other_count = 0
    total_words = 0
    total_length = 0
    longest_title = ""

    for message in messages:
        title = commit_title(message)
        total_length += len(title)

        if len(title) > len(longest_title):
            longest_title = title

        words = extract_words(title)
        word_counts.update(words)
        total_words += len(words)

        commit_type, color = classify_commit(title)
        if commit_type == OTHER_COMMIT_TYPE:
            other_count += 1
            continue
        if commit_type not in type_counts:
            type_counts[commit_type] = {"count": 0, "color": color}
        type_counts[commit_type]["count"] += 1

    word_frequency = tuple(
        WordFrequency(
            word=word,
            count=count,
            percentage=(count / total_words) * 100 if total_words > 0 else 0
        )
        for word, count in word_counts.most_common(TOP_WORDS_LIMIT)
    )

    if other_count > 0:
        type_counts[OTHER_COMMIT_TYPE] = {"count": other_count, "color": OTHER_COMMIT_TYPE_COLOR}

    commit_types = sorted(
        (CommitType(type=name, count=data["count"], color=data["color"])
         for name, data in type_counts.items()),
        key=lambda commit_type: commit_type.count,
        reverse=True
    )

    total_messages = len(messages)
    # Round half up
    average_length = math.floor(total_length / total_messages + 0.5) if total_messages > 0 else 0

    return CommitInsights(
        total_commit_messages=total_messages,
        word_frequency=word_frequency,
        commit_types=tuple(commit_types),
        average_message_length=average_length,
        longest_message=longest_title[:LONGEST_MESSAGE_LENGTH]
    )
