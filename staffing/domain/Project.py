"""Project domain entity: code, name, date range, manager and committed hours per employee."""
from datetime import date
from typing import Dict, List, Optional

from staffing.domain.Employee import Employee
from staffing.logic.calendar.working_days import working_days
from staffing.utilities.constants import DATE_FORMAT, ISO_DATE_FORMAT


class Project:
    def __init__(self, code: str, name: str = "", start_date: Optional[date] = None,
                 end_date: Optional[date] = None):
        self.code = code
        self.name = name
        self.start_date = start_date
        self.end_date = end_date
        # Bound when the project is added to a plan
        self.manager: Optional[Employee] = None
        self.committed_hours_per_day: Dict[Employee, int] = {}

    def __eq__(self, other) -> bool:
        if not isinstance(other, Project):
            return NotImplemented
        return self.code == other.code

    def __lt__(self, other: "Project") -> bool:
        return self.code < other.code

    def __hash__(self) -> int:
        return hash(self.code)

    def __str__(self) -> str:
        return f"{self.name}({self.code})"

    __repr__ = __str__

    @property
    def working_days(self) -> List[date]:
        """Business days of the current date range (recomputed on every access)."""
        return working_days(self.start_date, self.end_date)

    @property
    def num_working_days(self) -> int:
        return len(self.working_days)

    def add_commitment(self, employee: Employee, hours_per_day: int):
        '''Adds hours_per_day to whatever the employee already committed on this project.'''
        self.committed_hours_per_day[employee] = self.committed_hours_per_day.get(employee, 0) + hours_per_day

    def describe_period(self) -> str:
        if not self.start_date or not self.end_date:
            return "-"
        return f"{self.start_date.strftime(DATE_FORMAT)} - {self.end_date.strftime(DATE_FORMAT)}"

    def to_dict(self):
        return {
            "code": self.code,
            "name": self.name,
            "start_date": self.start_date.strftime(ISO_DATE_FORMAT) if self.start_date else "",
            "end_date": self.end_date.strftime(ISO_DATE_FORMAT) if self.end_date else "",
            "manager": self.manager.number if self.manager else None,
        }
