"""Data model for the annual review: fetched activity graph and derived records"""

from dataclasses import asdict, dataclass, field
from typing import Optional, Tuple

from annual_review.errors import DataShapeError


class Record:
    """Base for derived records, serializable to JSON-ready dictionaries"""

    def to_dict(self) -> dict:
        return asdict(self)


# =============================================================================
# Fetched data
# =============================================================================

@dataclass(frozen=True)
class UserProfile(Record):
    """Authenticated GitHub user"""

    login: str
    id: int = 0
    avatar_url: str = ""
    name: Optional[str] = None
    bio: Optional[str] = None
    company: Optional[str] = None
    location: Optional[str] = None
    email: Optional[str] = None
    blog: Optional[str] = None
    public_repos: int = 0
    public_gists: int = 0
    followers: int = 0
    following: int = 0
    created_at: str = ""

    @classmethod
    def from_github(cls, user) -> "UserProfile":
        """Build a profile from a PyGithub user object"""
        created_at = user.created_at.isoformat() if user.created_at else ""
        return cls(
            login=user.login,
            id=user.id,
            avatar_url=user.avatar_url or "",
            name=user.name,
            bio=user.bio,
            company=user.company,
            location=user.location,
            email=user.email,
            blog=user.blog,
            public_repos=user.public_repos or 0,
            public_gists=user.public_gists or 0,
            followers=user.followers or 0,
            following=user.following or 0,
            created_at=created_at
        )

    @classmethod
    def from_dict(cls, data: dict) -> "UserProfile":
        """Build a profile from a REST-style user dictionary"""
        if not data or not data.get("login"):
            raise DataShapeError("User profile has no login")
        return cls(**{key: data[key] for key in cls.__dataclass_fields__ if key in data})


@dataclass(frozen=True)
class ContributionDay:
    date: str
    count: int
    color: str = ""
    level: str = "NONE"


@dataclass(frozen=True)
class ContributionWeek:
    days: Tuple[ContributionDay, ...] = ()


@dataclass(frozen=True)
class ContributionCalendar(Record):
    total_contributions: int = 0
    weeks: Tuple[ContributionWeek, ...] = ()

    def iter_days(self):
        """Yield every day in calendar order"""
        for week in self.weeks:
            yield from week.days


@dataclass(frozen=True)
class ContributionTotals:
    commits: int = 0
    pull_requests: int = 0
    issues: int = 0
    repositories: int = 0
    restricted: int = 0


@dataclass(frozen=True)
class LanguageEdge:
    name: str
    size: int
    color: Optional[str] = None


@dataclass(frozen=True)
class RepositoryNode:
    """Owned repository as returned by the activity graph query"""

    name: str
    url: str = ""
    description: Optional[str] = None
    star_count: int = 0
    fork_count: int = 0
    primary_language: Optional[str] = None
    languages: Tuple[LanguageEdge, ...] = ()
    # None when the repository has no default branch (e.g. empty repository)
    commit_count: Optional[int] = None


@dataclass(frozen=True)
class ActivityGraph:
    """One year of a user's activity, as fetched"""

    calendar: ContributionCalendar
    totals: ContributionTotals
    repositories: Tuple[RepositoryNode, ...] = ()
    follower_count: int = 0

    @classmethod
    def from_graphql(cls, user: dict) -> "ActivityGraph":
        """
        Parse the `user` object of the activity graph query.

        Optional nested fields (default branch, primary language, colors)
        resolve to None; missing required sections raise DataShapeError.
        """
        if not user:
            raise DataShapeError("Activity graph has no user")

        collection = user.get("contributionsCollection")
        if not collection:
            raise DataShapeError("Activity graph has no contributionsCollection")

        calendar_data = collection.get("contributionCalendar")
        if not calendar_data:
            raise DataShapeError("Activity graph has no contributionCalendar")

        return cls(
            calendar=_parse_calendar(calendar_data),
            totals=ContributionTotals(
                commits=collection.get("totalCommitContributions") or 0,
                pull_requests=collection.get("totalPullRequestContributions") or 0,
                issues=collection.get("totalIssueContributions") or 0,
                repositories=collection.get("totalRepositoryContributions") or 0,
                restricted=collection.get("restrictedContributionsCount") or 0
            ),
            repositories=tuple(
                _parse_repository(node)
                for node in (user.get("repositories") or {}).get("nodes") or []
                if node
            ),
            follower_count=(user.get("followers") or {}).get("totalCount") or 0
        )


def _parse_calendar(data: dict) -> ContributionCalendar:
    weeks = []
    for week in data.get("weeks") or []:
        days = []
        for day in week.get("contributionDays") or []:
            if not day.get("date"):
                raise DataShapeError("Contribution day has no date")
            days.append(ContributionDay(
                date=day["date"],
                count=day.get("contributionCount") or 0,
                color=day.get("color") or "",
                level=day.get("contributionLevel") or "NONE"
            ))
        weeks.append(ContributionWeek(days=tuple(days)))

    return ContributionCalendar(
        total_contributions=data.get("totalContributions") or 0,
        weeks=tuple(weeks)
    )


def _parse_repository(node: dict) -> RepositoryNode:
    if not node.get("name"):
        raise DataShapeError("Repository has no name")

    languages = []
    for edge in (node.get("languages") or {}).get("edges") or []:
        language = edge.get("node") or {}
        if not language.get("name"):
            continue
        languages.append(LanguageEdge(
            name=language["name"],
            size=edge.get("size") or 0,
            color=language.get("color")
        ))

    commit_count = None
    branch = node.get("defaultBranchRef")
    if branch:
        history = (branch.get("target") or {}).get("history")
        if history is not None:
            commit_count = history.get("totalCount")

    primary_language = node.get("primaryLanguage") or {}

    return RepositoryNode(
        name=node["name"],
        url=node.get("url") or "",
        description=node.get("description"),
        star_count=node.get("stargazerCount") or 0,
        fork_count=node.get("forkCount") or 0,
        primary_language=primary_language.get("name"),
        languages=tuple(languages),
        commit_count=commit_count
    )


@dataclass(frozen=True)
class CommitRecord:
    message: str
    committed_date: str = ""

    @property
    def title(self) -> str:
        return self.message.split("\n")[0]


# =============================================================================
# Derived records
# =============================================================================

@dataclass(frozen=True)
class LanguageStat(Record):
    name: str
    size: int
    color: str
    percentage: float


@dataclass(frozen=True)
class BusiestDay(Record):
    date: str
    contributions: int


@dataclass(frozen=True)
class MonthlyContribution(Record):
    month: str
    commits: int = 0
    # Not derivable from the calendar, always 0
    prs: int = 0
    issues: int = 0


@dataclass(frozen=True)
class Repository(Record):
    """Repository as shown in the review"""

    name: str
    url: str
    description: Optional[str]
    stars: int
    forks: int
    language: Optional[str]
    commits: int


@dataclass(frozen=True)
class WordFrequency(Record):
    word: str
    count: int
    percentage: float


@dataclass(frozen=True)
class CommitType(Record):
    type: str
    count: int
    color: str


@dataclass(frozen=True)
class CommitInsights(Record):
    total_commit_messages: int
    word_frequency: Tuple[WordFrequency, ...]
    commit_types: Tuple[CommitType, ...]
    average_message_length: int
    longest_message: str
    # Hour-of-day data is not available from commit messages
    most_active_hour: int = 0
    commits_by_hour: Tuple[int, ...] = field(default=(0,) * 24)


@dataclass(frozen=True)
class AnnualReviewSummary(Record):
    """Complete annual review for one user and year"""

    year: int
    user: UserProfile
    total_commits: int
    total_prs: int
    total_issues: int
    total_stars: int
    new_followers: int
    most_active_repo: Optional[Repository]
    top_languages: Tuple[LanguageStat, ...]
    busiest_day: Optional[BusiestDay]
    contribution_calendar: Optional[ContributionCalendar]
    repositories: Tuple[Repository, ...]
    monthly_contributions: Tuple[MonthlyContribution, ...]
    commit_insights: Optional[CommitInsights] = None
