"""Core planning logic layer.

Subpackages:
- calendar: working days of a date range
- budget: manpower and managed budget arithmetic
- reporting: plan-wide statistics

Nothing in here reaches back into api or infra.
"""
__all__ = ["calendar", "budget", "reporting"]
