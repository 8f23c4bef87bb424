"""GitHub data fetching and annual review processing"""

from .calendar_processor import calculate_monthly_contributions, find_busiest_day
from .commit_processor import analyze_commit_messages, classify_commit
from .language_processor import calculate_language_stats
from .repository_processor import calculate_total_stars, find_most_active_repo
from .review_fetcher import GraphQLClient, ReviewFetcher
from .review_processor import ReviewAssembler, compute_annual_review, year_window
