"""Planning repository helpers (JSON planning files)."""
import json
import logging
from pathlib import Path
from typing import Optional, Union

from pydantic import ValidationError

from staffing.domain.Employee import Employee
from staffing.domain.PlanningSystem import PlanningSystem
from staffing.domain.Project import Project
from staffing.infra.paths import resolve_plan_path
from staffing.utilities.validators import PlanningInput

logger = logging.getLogger(__name__)


def build_from_input(data: PlanningInput, name: str) -> PlanningSystem:
    """Assemble a PlanningSystem from an already validated planning document."""
    plan = PlanningSystem(data.name or name, data.year)
    for e in data.employees:
        plan.add_employee(Employee(e.number, e.name, e.hourly_wage))
    for p in data.projects:
        project = Project(p.code, p.name, p.start_date, p.end_date)
        plan.add_project(project, plan.get_employee(p.manager))
    for c in data.commitments:
        plan.add_commitment(c.project, c.employee, c.hours_per_day)
    return plan


def import_from_json(resource_name: str) -> Optional[PlanningSystem]:
    """Load a complete planning configuration from a JSON file.

    resource_name is a path or a file name inside the data directory.
    Returns None (after logging the cause) when the file is missing or malformed.
    """
    path = resolve_plan_path(resource_name)
    try:
        with open(path, 'r', encoding='utf-8') as f:
            raw = json.load(f)
        data = PlanningInput.model_validate(raw)
    except FileNotFoundError:
        logger.error(f"Planning file not found: {path}")
        return None
    except json.JSONDecodeError:
        logger.exception(f"Invalid JSON in planning file '{resource_name}'")
        return None
    except UnicodeDecodeError:
        logger.exception(f"Planning file '{resource_name}' is not valid UTF-8")
        return None
    except ValidationError:
        logger.exception(f"Invalid planning data in '{resource_name}'")
        return None
    except OSError:
        logger.exception(f"Could not read planning file '{resource_name}'")
        return None

    plan = build_from_input(data, resource_name)
    logger.info(f"Loaded {plan} from {path}")
    return plan


def plan_to_dict(plan: PlanningSystem):
    """Converts a plan to the planning file layout read by import_from_json."""
    return {
        "name": plan.name,
        "year": plan.planning_year,
        "employees": [e.to_dict() for e in plan.employees],
        "projects": [p.to_dict() for p in plan.projects],
        "commitments": [
            {"project": p.code, "employee": e.number, "hours_per_day": hours}
            for p in plan.projects
            for e, hours in sorted(p.committed_hours_per_day.items())
        ],
    }


def export_to_json(plan: PlanningSystem, path: Union[str, Path]) -> Path:
    path = Path(path)
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(plan_to_dict(plan), f, indent=2, ensure_ascii=False)
    return path
