"""Configuration management for the Staffing Planner application."""
import os
from typing import Final
from pathlib import Path

from dotenv import load_dotenv

from staffing.utilities.constants import JUNIOR_WAGE_LIMIT as _DEFAULT_JUNIOR_WAGE_LIMIT

# Load environment variables from .env file if it exists
env_path = Path(__file__).parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)

# Application Settings
APP_HOST: Final[str] = os.getenv('APP_HOST', '0.0.0.0')
APP_PORT: Final[int] = int(os.getenv('APP_PORT', '8000'))
DEBUG: Final[bool] = os.getenv('DEBUG', 'False').lower() == 'true'
LOG_LEVEL: Final[str] = os.getenv('LOG_LEVEL', 'DEBUG' if DEBUG else 'INFO').upper()

# Reporting
JUNIOR_WAGE_LIMIT: Final[int] = int(os.getenv('JUNIOR_WAGE_LIMIT', str(_DEFAULT_JUNIOR_WAGE_LIMIT)))

# File Paths
BASE_DIR: Final[Path] = Path(__file__).parent.parent
DATA_DIR: Final[Path] = Path(os.getenv('STAFFING_DATA_DIR', str(BASE_DIR / 'data'))).resolve()
DEFAULT_PLAN_FILE: Final[str] = os.getenv('STAFFING_PLAN_FILE', 'planning_2019')
