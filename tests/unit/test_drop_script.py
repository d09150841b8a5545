"""Tests for the drop-schema script."""
from __future__ import annotations

import pytest
from sqlalchemy.dialects import postgresql
from structlog.testing import capture_logs

from braindiff.infrastructure.database.connection import drop_schema_statement
from braindiff.scripts import drop


class RecordingExecutor:
    """Executor stand-in that records statements and fails on demand."""

    def __init__(self, failures: dict[str, Exception] | None = None) -> None:
        self.failures = failures or {}
        self.schemas: list[str] = []

    async def __call__(self, statement: object) -> None:
        name = statement.element  # DropSchema keeps the schema name here
        self.schemas.append(name)
        if name in self.failures:
            raise self.failures[name]


def _events(logs: list[dict]) -> list[str]:
    return [entry["event"] for entry in logs]


class TestDropSchemaStatement:
    """Tests for the DDL builder."""

    def test_renders_if_exists_cascade(self) -> None:
        """Test the generated SQL."""
        sql = str(drop_schema_statement("analytics").compile(dialect=postgresql.dialect()))
        assert sql == "DROP SCHEMA IF EXISTS analytics CASCADE"

    def test_quotes_unsafe_names(self) -> None:
        """Test that names are quoted, not interpolated."""
        sql = str(drop_schema_statement('bad"; DROP').compile(dialect=postgresql.dialect()))
        assert sql == 'DROP SCHEMA IF EXISTS "bad""; DROP" CASCADE'


class TestDropSchemas:
    """Tests for drop_schemas."""

    async def test_empty_list_is_noop(self) -> None:
        """Test that no statement is issued without schemas."""
        executor = RecordingExecutor()
        with capture_logs() as logs:
            code = await drop.drop_schemas([], executor=executor)
        assert code == 0
        assert executor.schemas == []
        assert _events(logs) == ["No schemas specified to drop."]

    async def test_successful_drop(self) -> None:
        """Test a single successful drop."""
        executor = RecordingExecutor()
        with capture_logs() as logs:
            code = await drop.drop_schemas(["analytics"], executor=executor)
        assert code == 0
        assert executor.schemas == ["analytics"]
        assert "Successfully dropped schema" in _events(logs)
        assert logs[-1]["event"] == "All specified schemas dropped successfully."

    async def test_blank_names_are_skipped(self) -> None:
        """Test that blank entries are warned about and not attempted."""
        executor = RecordingExecutor()
        with capture_logs() as logs:
            code = await drop.drop_schemas(["analytics", "", "   "], executor=executor)
        assert code == 0
        assert executor.schemas == ["analytics"]
        warnings = [e for e in logs if e["log_level"] == "warning"]
        assert len(warnings) == 2
        assert warnings[0]["event"] == "Skipping empty schema name."

    async def test_failure_sets_exit_code(self) -> None:
        """Test that a failing drop is reported and yields status 1."""
        executor = RecordingExecutor(
            failures={"analytics": PermissionError("permission denied for schema analytics")}
        )
        with capture_logs() as logs:
            code = await drop.drop_schemas(["analytics"], executor=executor)
        assert code == 1
        errors = [e for e in logs if e["log_level"] == "error"]
        assert errors[0]["event"] == "Error dropping schema"
        assert errors[0]["schema"] == "analytics"
        assert "permission denied" in errors[0]["error"]
        assert errors[-1]["event"] == "Some schemas failed to drop."

    async def test_failure_does_not_stop_remaining_drops(self) -> None:
        """Test that later schemas are still attempted."""
        executor = RecordingExecutor(failures={"first": RuntimeError("locked")})
        with capture_logs() as logs:
            code = await drop.drop_schemas(["first", "second"], executor=executor)
        assert code == 1
        assert executor.schemas == ["first", "second"]
        dropped = [e["schema"] for e in logs if e["event"] == "Successfully dropped schema"]
        assert dropped == ["second"]


class TestMain:
    """Tests for the command line entry point."""

    def test_no_arguments_exits_zero(self) -> None:
        """Test the no-op path through main."""
        with pytest.raises(SystemExit) as exc_info:
            drop.main([])
        assert exc_info.value.code == 0

    def test_exit_code_follows_drop_result(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that main exits with the status of the run."""
        executor = RecordingExecutor(failures={"analytics": OSError("denied")})
        monkeypatch.setattr(drop, "execute_statement", executor)

        with pytest.raises(SystemExit) as exc_info:
            drop.main(["analytics"])
        assert exc_info.value.code == 1
        assert executor.schemas == ["analytics"]

    def test_owned_adds_configured_schemas(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that --owned drops the configured schemas once each."""
        executor = RecordingExecutor()
        monkeypatch.setattr(drop, "execute_statement", executor)
        monkeypatch.setattr(drop.settings, "database_schema_filter", ["analytics", "staging"])

        with pytest.raises(SystemExit) as exc_info:
            drop.main(["analytics", "--owned"])
        assert exc_info.value.code == 0
        assert executor.schemas == ["analytics", "staging"]
