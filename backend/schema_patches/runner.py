"""
Schema Patch Runner
Applies a fixed list of idempotent DDL statements over one exclusive connection
"""
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Callable, List, Optional

from sqlalchemy.engine import Engine
from sqlalchemy.exc import DBAPIError
import logging

from backend.config import (
    ConfigurationError,
    Settings,
    configure_logging,
    get_settings,
    resolve_connection_string,
)
from backend.database import create_script_engine

logger = logging.getLogger(__name__)

# duplicate_table, duplicate_column, duplicate_object, duplicate_schema
ALREADY_EXISTS_CODES = {"42P07", "42701", "42710", "42P06"}


class StatementStatus(str, Enum):
    APPLIED = "applied"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass(frozen=True)
class Statement:
    """One DDL statement, inline or loaded from a .sql file"""
    label: str
    sql: str = ""
    sql_file: Optional[Path] = None
    # Only for SQL that cannot carry its own IF NOT EXISTS guard
    tolerate_existing: bool = False

    def render(self) -> str:
        if self.sql_file is not None:
            if not self.sql_file.is_file():
                raise ConfigurationError(f"SQL file not found: {self.sql_file}")
            return self.sql_file.read_text(encoding="utf-8")
        return self.sql


@dataclass(frozen=True)
class SchemaPatch:
    name: str
    description: str
    statements: List[Statement]


@dataclass
class StatementOutcome:
    label: str
    status: StatementStatus
    error: Optional[str] = None


@dataclass
class PatchReport:
    """Result of one run; `error` is set when the run stopped early"""
    patch: SchemaPatch
    outcomes: List[StatementOutcome] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def succeeded(self) -> bool:
        return self.error is None and all(
            o.status != StatementStatus.FAILED for o in self.outcomes
        )

    def count(self, status: StatementStatus) -> int:
        return sum(1 for o in self.outcomes if o.status == status)


def is_already_exists(exc: BaseException) -> bool:
    """True if the database refused a statement because its target already exists"""
    orig = getattr(exc, "orig", None) or exc
    code = getattr(orig, "pgcode", None) or getattr(orig, "sqlstate", None)
    if code in ALREADY_EXISTS_CODES:
        return True
    return "already exists" in str(orig).lower()


def describe_error(exc: BaseException) -> str:
    """First line of the driver message, without SQLAlchemy's statement dump"""
    orig = getattr(exc, "orig", None) or exc
    text = str(orig).strip()
    return text.splitlines()[0] if text else exc.__class__.__name__


def run_patch(
    patch: SchemaPatch,
    connection_string: str,
    engine_factory: Callable[[str], Engine] = create_script_engine,
) -> PatchReport:
    """
    Apply a schema patch.

    Statements run in order and nothing is retried. The connection is
    released and the engine disposed whatever the outcome.

    Raises:
        ConfigurationError: if a statement's SQL file is missing (before any I/O)
    """
    rendered = [(statement, statement.render()) for statement in patch.statements]
    report = PatchReport(patch=patch)

    logger.info(f"Applying patch '{patch.name}': {patch.description}")
    engine = engine_factory(connection_string)
    try:
        _execute(engine, rendered, report)
    finally:
        engine.dispose()

    _log_summary(report)
    return report


def _execute(engine: Engine, rendered, report: PatchReport):
    logger.info("Connecting to database...")
    try:
        connection = engine.connect()
    except DBAPIError as e:
        report.error = f"Connection failed: {describe_error(e)}"
        logger.error(f"❌ {report.error}")
        return

    try:
        for statement, sql in rendered:
            try:
                connection.exec_driver_sql(sql)
            except DBAPIError as e:
                if statement.tolerate_existing and is_already_exists(e):
                    logger.warning(f"⚠️ Already exists, skipped: {statement.label}")
                    report.outcomes.append(
                        StatementOutcome(statement.label, StatementStatus.SKIPPED, describe_error(e))
                    )
                    continue

                message = describe_error(e)
                logger.error(f"❌ Failed: {statement.label}: {message}")
                report.outcomes.append(
                    StatementOutcome(statement.label, StatementStatus.FAILED, message)
                )
                report.error = f"{statement.label}: {message}"
                return

            logger.info(f"✅ Applied/verified: {statement.label}")
            report.outcomes.append(StatementOutcome(statement.label, StatementStatus.APPLIED))
    finally:
        connection.close()


def _log_summary(report: PatchReport):
    logger.info("=" * 60)
    if report.succeeded:
        logger.info(f"Patch '{report.patch.name}' complete!")
    else:
        logger.error(f"Patch '{report.patch.name}' failed: {report.error}")
    logger.info(f"  ✅ Applied: {report.count(StatementStatus.APPLIED)}")
    logger.info(f"  ⚠️ Skipped: {report.count(StatementStatus.SKIPPED)}")
    logger.info(f"  ❌ Failed:  {report.count(StatementStatus.FAILED)}")


def run_cli(
    patch: SchemaPatch,
    settings: Optional[Settings] = None,
    engine_factory: Callable[[str], Engine] = create_script_engine,
) -> int:
    """Entry point shared by the backend/scripts patch CLIs; returns the exit code"""
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    try:
        connection_string = resolve_connection_string(settings)
        report = run_patch(patch, connection_string, engine_factory=engine_factory)
    except ConfigurationError as e:
        logger.error(f"❌ {e}")
        return 1

    return 0 if report.succeeded else 1
