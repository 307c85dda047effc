from typing import Final

DATE_FORMAT: Final[str] = "%d-%m-%Y"
ISO_DATE_FORMAT: Final[str] = "%Y-%m-%d"

# Employees assigned to at least this many projects count as most involved
MIN_ASSIGNMENT_COUNT: Final[int] = 10
# Upper hourly wage (inclusive) of a junior employee in the managed budget overview
JUNIOR_WAGE_LIMIT: Final[int] = 30

DEFAULT_PLAN_NAME: Final[str] = "none"
DEFAULT_PLANNING_YEAR: Final[int] = 2000
