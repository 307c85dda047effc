"""
Input validation schemas using Pydantic for planning files and API payloads.
"""
from pydantic import BaseModel, Field, StringConstraints, model_validator
from typing import Annotated, List, Optional
from datetime import date

from staffing.utilities.constants import DEFAULT_PLANNING_YEAR

# Whitespace is stripped before the length checks run
Code = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=20)]
Name = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=200)]


class EmployeeInput(BaseModel):
    """Schema for employee input validation."""
    number: int = Field(..., ge=0)
    name: Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=100)]
    hourly_wage: int = Field(..., gt=0)


class ProjectInput(BaseModel):
    """Schema for a project row of a planning file; manager is an employee number."""
    code: Code
    name: Name
    start_date: date
    end_date: date
    manager: int = Field(..., ge=0)

    @model_validator(mode='after')
    def check_period(self):
        if self.start_date > self.end_date:
            raise ValueError(f"Project {self.code} ends before it starts")
        return self


class CommitmentInput(BaseModel):
    """Schema for commitment validation."""
    project: Code
    employee: int = Field(..., ge=0)
    hours_per_day: int = Field(..., gt=0, le=24)


class ProjectWithManagerInput(BaseModel):
    """Schema for adding a project together with its manager record."""
    code: Code
    name: Name
    start_date: date
    end_date: date
    manager: EmployeeInput

    @model_validator(mode='after')
    def check_period(self):
        if self.start_date > self.end_date:
            raise ValueError(f"Project {self.code} ends before it starts")
        return self


class PlanningInput(BaseModel):
    """Schema of a complete planning file."""
    year: int = Field(DEFAULT_PLANNING_YEAR, ge=1900, le=2999)
    employees: List[EmployeeInput] = Field(default_factory=list)
    projects: List[ProjectInput] = Field(default_factory=list)
    commitments: List[CommitmentInput] = Field(default_factory=list)
    name: Optional[str] = None

    @model_validator(mode='after')
    def check_references(self):
        """Unique keys, and every manager or commitment must point to a known entity."""
        numbers = [e.number for e in self.employees]
        if len(numbers) != len(set(numbers)):
            raise ValueError('Duplicate employee number')
        codes = [p.code for p in self.projects]
        if len(codes) != len(set(codes)):
            raise ValueError('Duplicate project code')
        known_numbers, known_codes = set(numbers), set(codes)
        for p in self.projects:
            if p.manager not in known_numbers:
                raise ValueError(f"Unknown manager {p.manager} for project {p.code}")
        for c in self.commitments:
            if c.project not in known_codes:
                raise ValueError(f"Commitment refers to unknown project {c.project}")
            if c.employee not in known_numbers:
                raise ValueError(f"Commitment refers to unknown employee {c.employee}")
        return self
