from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import UTC, datetime


@dataclass(frozen=True, slots=True)
class CtxError:
    # Structured error record kept on the context for the run summary.
    code: str
    message: str
    step: str | None = None
    details: dict[str, object] = field(default_factory=dict)


@dataclass(slots=True)
class Context:
    # Context is mutable runtime metadata for one pipeline input (not domain state).
    trace_id: str
    run_id: str
    scenario_id: str
    received_at: datetime
    metrics: dict[str, float] = field(default_factory=dict)
    notes: list[str] = field(default_factory=list)
    errors: list[CtxError] = field(default_factory=list)

    def metric_set(self, key: str, value: float | int) -> None:
        if not isinstance(value, (float, int)):
            raise TypeError("Context.metric_set value must be numeric")
        self.metrics[key] = float(value)

    def metric_add(self, key: str, value: float | int = 1) -> None:
        if not isinstance(value, (float, int)):
            raise TypeError("Context.metric_add value must be numeric")
        self.metrics[key] = self.metrics.get(key, 0.0) + float(value)

    def note(self, text: str) -> None:
        # Notes are append-only in order of occurrence.
        self.notes.append(text)

    def error(self, code: str, message: str, *, step: str | None = None, details: dict[str, object] | None = None) -> None:
        self.errors.append(
            CtxError(
                code=code,
                message=message,
                step=step,
                details={} if details is None else details,
            )
        )


@dataclass(frozen=True, slots=True)
class ContextFactory:
    # ContextFactory owns per-input Context creation.
    run_id: str
    scenario_id: str

    def new(self) -> Context:
        return Context(
            trace_id=uuid.uuid4().hex,
            run_id=self.run_id,
            scenario_id=self.scenario_id,
            received_at=datetime.now(tz=UTC),
        )
