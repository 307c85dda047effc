from pathlib import Path

from staffing.utilities.config import DATA_DIR

# Centralized paths for data files (single source of truth)
PLAN_SUFFIX = '.json'


def resolve_plan_path(resource_name: str) -> Path:
    """Map a resource name onto a planning file.

    Existing paths are used as given; anything else is looked up in DATA_DIR,
    with the .json suffix appended when missing.
    """
    candidate = Path(resource_name)
    if candidate.exists():
        return candidate
    if candidate.suffix != PLAN_SUFFIX:
        candidate = candidate.with_name(candidate.name + PLAN_SUFFIX)
    return DATA_DIR / candidate


__all__ = ['DATA_DIR', 'PLAN_SUFFIX', 'resolve_plan_path']
