"""
Export functionality for planning statistics and plans.
"""
import csv
import json
from datetime import datetime
from pathlib import Path
from typing import Optional
import logging

from staffing.domain.PlanningSystem import PlanningSystem
from staffing.infra.Planning_Repository import export_to_json
from staffing.logic.reporting.statistics import PlanningStatistics
from staffing.utilities.constants import JUNIOR_WAGE_LIMIT

logger = logging.getLogger(__name__)


class PlanningExporter:
    """Export statistics and plans in various formats."""

    def __init__(self, plan: PlanningSystem):
        self.plan = plan
        self.stats = PlanningStatistics(plan)

    def _default_path(self, prefix: str, suffix: str) -> Path:
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        return Path(f"{prefix}_{timestamp}{suffix}")

    def export_statistics(self, output_path: Path = None, max_wage: int = JUNIOR_WAGE_LIMIT) -> Optional[Path]:
        """Export the statistics report to a JSON file."""
        output_path = Path(output_path) if output_path else self._default_path("planning_statistics", ".json")
        try:
            report = self.stats.generate_report(max_wage)
            with open(output_path, 'w', encoding='utf-8') as f:
                json.dump(report, f, indent=2, ensure_ascii=False)
            logger.info(f"Exported statistics of {self.plan} to {output_path}")
            return output_path
        except OSError as e:
            logger.error(f"Export failed: {e}")
            return None

    def export_monthly_spends_csv(self, output_path: Path = None) -> Optional[Path]:
        """Export cumulative monthly spends to CSV for Excel compatibility."""
        output_path = Path(output_path) if output_path else self._default_path("monthly_spends", ".csv")
        try:
            with open(output_path, 'w', newline='', encoding='utf-8') as csvfile:
                writer = csv.DictWriter(csvfile, fieldnames=['month', 'spend'])
                writer.writeheader()
                for month, spend in self.stats.cumulative_monthly_spends().items():
                    writer.writerow({'month': month.label, 'spend': spend})
            logger.info(f"Exported monthly spends to CSV: {output_path}")
            return output_path
        except OSError as e:
            logger.error(f"CSV export failed: {e}")
            return None

    def export_plan(self, output_path: Path = None) -> Optional[Path]:
        """Export the plan itself in the planning file layout."""
        output_path = Path(output_path) if output_path else self._default_path("planning_export", ".json")
        try:
            export_to_json(self.plan, output_path)
            logger.info(f"Exported {self.plan} to {output_path}")
            return output_path
        except OSError as e:
            logger.error(f"Export failed: {e}")
            return None
