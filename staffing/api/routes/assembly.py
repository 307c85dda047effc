from fastapi import APIRouter
import logging

from staffing.api.state import PLAN_LOCK, get_plan
from staffing.domain.Employee import Employee
from staffing.domain.Project import Project
from staffing.utilities.validators import CommitmentInput, EmployeeInput, ProjectWithManagerInput

router = APIRouter(prefix="/api")
logger = logging.getLogger("staffing_app")


@router.post("/employees")
def add_employee(payload: EmployeeInput):
    plan = get_plan()
    with PLAN_LOCK:
        added = plan.add_employee(Employee(payload.number, payload.name, payload.hourly_wage))
    logger.info(f"POST /api/employees {payload.number}: added={added}")
    return {"status": "ok", "added": added}


@router.post("/projects")
def add_project(payload: ProjectWithManagerInput):
    """Add a project with its manager; a known employee number reuses the existing record."""
    plan = get_plan()
    m = payload.manager
    project = Project(payload.code, payload.name, payload.start_date, payload.end_date)
    with PLAN_LOCK:
        added = plan.add_project(project, Employee(m.number, m.name, m.hourly_wage))
    logger.info(f"POST /api/projects {payload.code}: added={added}")
    return {"status": "ok", "added": added}


@router.post("/commitments")
def add_commitment(payload: CommitmentInput):
    plan = get_plan()
    with PLAN_LOCK:
        added = plan.add_commitment(payload.project, payload.employee, payload.hours_per_day)
    logger.info(f"POST /api/commitments {payload.project}/{payload.employee}: added={added}")
    return {"status": "ok", "added": added}
