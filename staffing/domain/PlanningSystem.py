"""PlanningSystem aggregate: the employees, projects and commitments of one planning year."""
import logging
from typing import Dict, List, Optional, Set

from staffing.domain.Employee import Employee
from staffing.domain.Project import Project
from staffing.utilities.constants import DEFAULT_PLAN_NAME, DEFAULT_PLANNING_YEAR

logger = logging.getLogger(__name__)


class PlanningSystem:
    def __init__(self, name: str = DEFAULT_PLAN_NAME, planning_year: int = DEFAULT_PLANNING_YEAR):
        self.name = name  # refers to the source the plan was loaded from
        self.planning_year = planning_year
        self._employees: Dict[int, Employee] = {}
        self._projects: Dict[str, Project] = {}

    def __str__(self) -> str:
        return f"PlanningSystem_e{len(self._employees)}_p{len(self._projects)}"

    __repr__ = __str__

    # --- Read access ------------------------------------------------------
    @property
    def employees(self) -> List[Employee]:
        '''Employees ordered by number.'''
        return [self._employees[n] for n in sorted(self._employees)]

    @property
    def projects(self) -> List[Project]:
        '''Projects ordered by code.'''
        return [self._projects[c] for c in sorted(self._projects)]

    def get_employee(self, number: int) -> Optional[Employee]:
        return self._employees.get(number)

    def get_project(self, code: str) -> Optional[Project]:
        return self._projects.get(code)

    def assigned_projects(self, employee: Employee) -> Set[Project]:
        return employee.get_assigned_projects(self._projects.values())

    def summary(self):
        return {
            "name": self.name,
            "planning_year": self.planning_year,
            "employee_count": len(self._employees),
            "project_count": len(self._projects),
        }

    # --- Assembly ---------------------------------------------------------
    def add_employee(self, employee: Employee) -> bool:
        '''
        Registers the employee unless one with the same number is already known.
        '''
        if employee.number in self._employees:
            logger.debug(f"Employee {employee.number} already present, ignoring")
            return False
        self._employees[employee.number] = employee
        return True

    def add_project(self, project: Project, manager: Employee) -> bool:
        '''
        Adds the project and binds its manager.
        An already registered employee with the manager's number takes precedence
        over the supplied record.
        '''
        if project.code in self._projects:
            logger.debug(f"Project {project.code} already present, ignoring")
            return False
        unique_manager = self._employees.get(manager.number, manager)
        self.add_employee(unique_manager)
        project.manager = unique_manager
        unique_manager.managed_projects.add(project)
        self._projects[project.code] = project
        return True

    def add_commitment(self, project_code: str, employee_number: int, hours_per_day: int) -> bool:
        '''
        Adds hours_per_day for the identified employee on the identified project,
        on top of any commitment already registered for that pair.
        '''
        project = self._projects.get(project_code)
        employee = self._employees.get(employee_number)
        if project is None or employee is None:
            logger.debug(f"Ignoring commitment {project_code}/{employee_number}: unknown project or employee")
            return False
        project.add_commitment(employee, hours_per_day)
        return True
