"""Application services for parameter checking.

ParameterChecker is the main facade for running checks.
"""

from paramcheck.application.services.checker import ParameterChecker

__all__ = [
    "ParameterChecker",
]
