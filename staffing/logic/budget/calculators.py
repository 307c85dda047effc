"""Budget arithmetic over projects and the employees managing them."""
from staffing.domain.Employee import Employee
from staffing.domain.Project import Project

__all__ = ["daily_manpower_cost", "manpower_budget", "managed_budget"]


def daily_manpower_cost(project: Project) -> int:
    """Cost of one working day: sum of hours_per_day * hourly_wage over all commitments."""
    return sum(hours * employee.hourly_wage
               for employee, hours in project.committed_hours_per_day.items())


def manpower_budget(project: Project) -> int:
    """Cost of all committed hours across the project's working days."""
    return project.num_working_days * daily_manpower_cost(project)


def managed_budget(employee: Employee) -> int:
    """Sum of the manpower budgets of every project the employee manages."""
    return sum(manpower_budget(p) for p in employee.managed_projects)
