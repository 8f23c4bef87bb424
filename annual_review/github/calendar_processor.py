"""Busiest day and monthly totals from the contribution calendar"""

from datetime import date
from typing import Optional

from annual_review.config import MONTHS
from annual_review.models import BusiestDay, MonthlyContribution


def find_busiest_day(calendar) -> Optional[BusiestDay]:
    """Return the day with the most contributions, or None for an empty calendar"""
    busiest = None

    for day in calendar.iter_days():
        if busiest is None or day.count > busiest.count:
            busiest = day

    if busiest is None:
        return None
    return BusiestDay(date=busiest.date, contributions=busiest.count)


def calculate_monthly_contributions(calendar) -> list:
    """
    Bucket daily contribution counts into the 12 months

    The calendar only has a combined daily count, so everything lands in
    `commits`; `prs` and `issues` stay 0.
    """
    monthly = [0] * 12

    for day in calendar.iter_days():
        month = date.fromisoformat(day.date[:10]).month
        monthly[month - 1] += day.count

    return [
        MonthlyContribution(month=label, commits=commits)
        for label, commits in zip(MONTHS, monthly)
    ]
