"""
Idempotent schema patches applied out-of-band with backend/scripts
"""
from .runner import (
    PatchReport,
    SchemaPatch,
    Statement,
    StatementOutcome,
    StatementStatus,
    is_already_exists,
    run_cli,
    run_patch,
)

__all__ = [
    "PatchReport",
    "SchemaPatch",
    "Statement",
    "StatementOutcome",
    "StatementStatus",
    "is_already_exists",
    "run_cli",
    "run_patch",
]
