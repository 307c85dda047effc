"""Fluent helper to compose a small PlanningSystem with chained calls."""
from staffing.domain.Employee import Employee
from staffing.domain.PlanningSystem import PlanningSystem
from staffing.domain.Project import Project
from staffing.utilities.constants import DEFAULT_PLAN_NAME, DEFAULT_PLANNING_YEAR


class PlanBuilder:
    def __init__(self, name: str = DEFAULT_PLAN_NAME, year: int = DEFAULT_PLANNING_YEAR):
        self.plan = PlanningSystem(name, year)

    def add_employee(self, employee: Employee) -> "PlanBuilder":
        self.plan.add_employee(employee)
        return self

    def add_project(self, project: Project, manager: Employee) -> "PlanBuilder":
        self.plan.add_project(project, manager)
        return self

    def add_commitment(self, project_code: str, employee_number: int, hours_per_day: int) -> "PlanBuilder":
        self.plan.add_commitment(project_code, employee_number, hours_per_day)
        return self

    def build(self) -> PlanningSystem:
        return self.plan
