"""Export annual reviews to JSON and CSV formats"""

import csv
import json
import logging
from datetime import datetime
from pathlib import Path

from annual_review.config import REVIEW_EXPORTS_DIR

logger = logging.getLogger(__name__)


class ReviewExporter:
    """Writes an AnnualReviewSummary to disk"""

    def __init__(self, output_dir: str = REVIEW_EXPORTS_DIR):
        self.output_dir = Path(output_dir)

    def _user_dir(self, summary) -> Path:
        user_dir = self.output_dir / summary.user.login
        user_dir.mkdir(parents=True, exist_ok=True)
        return user_dir

    def export_json(self, summary) -> str:
        """
        Export the full review to JSON

        Args:
            summary: AnnualReviewSummary

        Returns:
            Path to exported file
        """
        filename = self._user_dir(summary) / f"review_{summary.year}.json"

        data = {
            "exported_at": datetime.now().isoformat(),
            "review": summary.to_dict()
        }

        with open(filename, 'w') as f:
            json.dump(data, f, indent=2)

        logger.info("Exported JSON to %s", filename)
        return str(filename)

    def export_monthly_csv(self, summary) -> str:
        """
        Export the monthly contribution trend to CSV

        Returns:
            Path to exported file
        """
        filename = self._user_dir(summary) / f"monthly_{summary.year}.csv"

        with open(filename, 'w', newline='') as f:
            writer = csv.writer(f)
            writer.writerow(["Month", "Username", "Year", "Commits", "PRs", "Issues"])

            for month in summary.monthly_contributions:
                writer.writerow([
                    month.month,
                    summary.user.login,
                    summary.year,
                    month.commits,
                    month.prs,
                    month.issues
                ])

        logger.info("Exported CSV to %s", filename)
        return str(filename)
