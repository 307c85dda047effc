"""Process-local plan instance served by the API.

The plan is loaded lazily from the configured planning file; an empty plan
is used when that file is absent or invalid. Mutations and queries both hold
PLAN_LOCK, since FastAPI runs sync endpoints in a thread pool.
"""
from __future__ import annotations
from threading import RLock
from typing import Optional
import logging

from staffing.domain.PlanningSystem import PlanningSystem
from staffing.infra.Planning_Repository import import_from_json
from staffing.utilities.config import DEFAULT_PLAN_FILE

logger = logging.getLogger("staffing_app")

PLAN_LOCK = RLock()
_plan: Optional[PlanningSystem] = None


def get_plan() -> PlanningSystem:
    global _plan
    with PLAN_LOCK:
        if _plan is None:
            _plan = import_from_json(DEFAULT_PLAN_FILE)
            if _plan is None:
                logger.warning(f"Starting with an empty plan ('{DEFAULT_PLAN_FILE}' not loaded)")
                _plan = PlanningSystem()
        return _plan


def set_plan(plan: Optional[PlanningSystem]) -> None:
    """Replace the served plan (None forces a reload on next access)."""
    global _plan
    with PLAN_LOCK:
        _plan = plan
