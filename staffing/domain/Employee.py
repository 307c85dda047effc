"""Employee domain entity: number, name, hourly wage and the projects it manages."""
from typing import Iterable, List, Set, TYPE_CHECKING

if TYPE_CHECKING:
    from staffing.domain.Project import Project


class Employee:
    def __init__(self, number: int, name: str = "", hourly_wage: int = 0):
        self.number = number
        self.name = name
        self.hourly_wage = hourly_wage
        self.managed_projects: Set["Project"] = set()

    # Identity is the employee number
    def __eq__(self, other) -> bool:
        if not isinstance(other, Employee):
            return NotImplemented
        return self.number == other.number

    def __lt__(self, other: "Employee") -> bool:
        return self.number < other.number

    def __hash__(self) -> int:
        return hash(self.number)

    def __str__(self) -> str:
        return f"{self.name}({self.number})"

    __repr__ = __str__

    def get_managed_projects(self) -> List["Project"]:
        '''Returns the managed projects ordered by project code.'''
        return sorted(self.managed_projects)

    def get_assigned_projects(self, projects: Iterable["Project"]) -> Set["Project"]:
        """Projects among `projects` that hold a nonzero commitment of this employee.

        Computed on every call from the commitment maps, never stored.
        """
        return {p for p in projects if p.committed_hours_per_day.get(self, 0) > 0}

    def to_dict(self):
        return {
            "number": self.number,
            "name": self.name,
            "hourly_wage": self.hourly_wage,
        }
