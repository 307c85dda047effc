"""
Planning statistics for a PlanningSystem.
Provides the six plan-level figures used in the yearly planning review.
"""
from datetime import datetime
from typing import Callable, Dict, List, Optional
import logging

from staffing.domain.Employee import Employee
from staffing.domain.PlanningSystem import PlanningSystem
from staffing.domain.Project import Project
from staffing.logic.budget.calculators import daily_manpower_cost, managed_budget, manpower_budget
from staffing.logic.calendar.working_days import Month, working_days_per_month
from staffing.utilities.constants import JUNIOR_WAGE_LIMIT, MIN_ASSIGNMENT_COUNT

logger = logging.getLogger(__name__)


def junior_filter(max_wage: int = JUNIOR_WAGE_LIMIT) -> Callable[[Employee], bool]:
    return lambda e: e.hourly_wage <= max_wage


class PlanningStatistics:
    """Compute statistics over the current state of a plan (nothing is cached)."""

    def __init__(self, plan: PlanningSystem):
        self.plan = plan

    def average_hourly_wage(self) -> float:
        employees = self.plan.employees
        if not employees:
            return 0.0
        return sum(e.hourly_wage for e in employees) / len(employees)

    def longest_project(self) -> Optional[Project]:
        """Project with the most working days; any one of them when several tie."""
        projects = self.plan.projects
        if not projects:
            return None
        return max(projects, key=lambda p: p.num_working_days)

    def most_involved_employees(self, min_count: int = MIN_ASSIGNMENT_COUNT) -> List[Employee]:
        """Employees assigned to at least min_count projects, ordered by name."""
        projects = self.plan.projects
        involved = [e for e in self.plan.employees
                    if len(e.get_assigned_projects(projects)) >= min_count]
        return sorted(involved, key=lambda e: (e.name, e.number))

    def total_manpower_budget(self) -> int:
        return sum(manpower_budget(p) for p in self.plan.projects)

    def managed_budget_overview(self, predicate: Callable[[Employee], bool]) -> Dict[Employee, int]:
        """
        Managed budget of every employee accepted by predicate.
        Employees rejected by the predicate are left out, accepted ones are kept
        even when their managed budget is 0.
        """
        return {e: managed_budget(e) for e in self.plan.employees if predicate(e)}

    def cumulative_monthly_spends(self) -> Dict[Month, int]:
        """
        Manpower spend per month of year, summed across all projects.
        A project contributes (its working days in the month) * (its daily manpower cost).
        Months without any working day of any project are absent.
        """
        totals: Dict[Month, int] = {}
        for project in self.plan.projects:
            day_cost = daily_manpower_cost(project)
            if day_cost == 0:
                continue
            for month, days in working_days_per_month(project.working_days).items():
                totals[month] = totals.get(month, 0) + days * day_cost
        return {month: totals[month] for month in sorted(totals)}

    def generate_report(self, max_wage: int = JUNIOR_WAGE_LIMIT) -> Dict:
        """Generate a JSON-friendly snapshot of all statistics."""
        longest = self.longest_project()
        report = dict(self.plan.summary())
        report.update({
            'average_hourly_wage': round(self.average_hourly_wage(), 2),
            'longest_project': {
                'code': longest.code,
                'name': longest.name,
                'working_days': longest.num_working_days,
            } if longest else None,
            'min_assignment_count': MIN_ASSIGNMENT_COUNT,
            'most_involved_employees': [
                {'number': e.number, 'name': e.name} for e in self.most_involved_employees()
            ],
            'total_manpower_budget': self.total_manpower_budget(),
            'junior_wage_limit': max_wage,
            'managed_budget_overview': [
                {'number': e.number, 'name': e.name, 'hourly_wage': e.hourly_wage, 'managed_budget': budget}
                for e, budget in self.managed_budget_overview(junior_filter(max_wage)).items()
            ],
            'cumulative_monthly_spends': [
                {'month': month.label, 'month_number': int(month), 'spend': spend}
                for month, spend in self.cumulative_monthly_spends().items()
            ],
            'generated_at': datetime.now().isoformat(),
        })
        logger.debug(f"Generated statistics report for {self.plan}")
        return report

    def print_report(self, max_wage: int = JUNIOR_WAGE_LIMIT):
        """Print the planning statistics to the console."""
        plan = self.plan
        print(f"\nProject Statistics of '{plan.name}' in the year {plan.planning_year}")
        employees, projects = plan.employees, plan.projects
        if not employees or not projects:
            print("No employees or projects have been set up...")
            return

        print(f"{len(employees)} employees have been assigned to {len(projects)} projects:\n")
        print(f"1. The average hourly wage of all employees is {self.average_hourly_wage():.2f}")
        longest = self.longest_project()
        print(f"2. The longest project is '{longest}' with {longest.num_working_days} available working days")
        print(f"3. The following employees have the broadest assignment in no less than "
              f"{MIN_ASSIGNMENT_COUNT} different projects:\n{self.most_involved_employees()}")
        print(f"4. The total budget of committed project manpower is {self.total_manpower_budget()}")
        overview = self.managed_budget_overview(junior_filter(max_wage))
        print(f"5. Below is an overview of total managed budget by junior employees "
              f"(hourly wage <= {max_wage}):\n{overview}")
        spends = {str(m): spend for m, spend in self.cumulative_monthly_spends().items()}
        print(f"6. Below is an overview of cumulative monthly project spends:\n{spends}")
