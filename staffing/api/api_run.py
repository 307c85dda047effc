from fastapi import FastAPI, Query, Response
import logging

from staffing.api.routes import assembly
from staffing.api.state import PLAN_LOCK, get_plan
from staffing.infra.pdf_utils import generate_pdf_for_statistics
from staffing.logic.budget.calculators import managed_budget, manpower_budget
from staffing.logic.reporting.statistics import PlanningStatistics
from staffing.utilities.config import JUNIOR_WAGE_LIMIT

# Logging
logger = logging.getLogger("staffing_app")

# Initialize FastAPI app
app = FastAPI(title="Staffing Plan Analytics API")

# Include routers
app.include_router(assembly.router)


# -------------------- API: Plan --------------------
# Queries hold PLAN_LOCK so no assembly request mutates the plan mid-iteration
@app.get("/api/plan")
def plan_summary():
    with PLAN_LOCK:
        return get_plan().summary()


@app.get("/api/employees")
def list_employees():
    with PLAN_LOCK:
        plan = get_plan()
        return {
            "count": len(plan.employees),
            "employees": [
                dict(e.to_dict(),
                     assigned_projects=len(plan.assigned_projects(e)),
                     managed_projects=[p.code for p in e.get_managed_projects()],
                     managed_budget=managed_budget(e))
                for e in plan.employees
            ],
        }


@app.get("/api/projects")
def list_projects():
    with PLAN_LOCK:
        plan = get_plan()
        return {
            "count": len(plan.projects),
            "projects": [
                dict(p.to_dict(),
                     period=p.describe_period(),
                     working_days=p.num_working_days,
                     manpower_budget=manpower_budget(p),
                     commitments={str(e.number): hours for e, hours in sorted(p.committed_hours_per_day.items())})
                for p in plan.projects
            ],
        }


# -------------------- API: Statistics --------------------
@app.get("/api/statistics")
def statistics(max_wage: int = Query(default=JUNIOR_WAGE_LIMIT, gt=0)):
    with PLAN_LOCK:
        return PlanningStatistics(get_plan()).generate_report(max_wage)


@app.get("/api/statistics/pdf")
def statistics_pdf(max_wage: int = Query(default=JUNIOR_WAGE_LIMIT, gt=0)):
    with PLAN_LOCK:
        plan = get_plan()
        report = PlanningStatistics(plan).generate_report(max_wage)
    pdf_bytes = generate_pdf_for_statistics(report)
    filename = f"statistics_{report['planning_year']}.pdf"
    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
