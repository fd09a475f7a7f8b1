"""Application-layer result objects."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from vb6enc.types import CommandName, EncodingLabel, ErrorKind, OutcomeStatus


@dataclass(frozen=True)
class FileOutcome:
    """Structured outcome for a single file."""

    path: Path
    status: OutcomeStatus
    encoding: EncodingLabel | None = None
    reason: str = ""
    error_kind: ErrorKind | None = None
    truncated: bool = False

    @property
    def failed(self) -> bool:
        return self.status is OutcomeStatus.FAILED


@dataclass(frozen=True)
class RunResult:
    """Aggregated outcomes of one run, in processing order."""

    command: CommandName
    root: Path
    outcomes: tuple[FileOutcome, ...] = ()

    def _count(self, status: OutcomeStatus) -> int:
        return sum(1 for outcome in self.outcomes if outcome.status is status)

    @property
    def converted(self) -> int:
        return self._count(OutcomeStatus.CONVERTED)

    @property
    def skipped(self) -> int:
        return self._count(OutcomeStatus.SKIPPED)

    @property
    def failed(self) -> int:
        return self._count(OutcomeStatus.FAILED)

    @property
    def unknown(self) -> int:
        return sum(1 for outcome in self.outcomes if outcome.encoding is EncodingLabel.UNKNOWN)

    @property
    def issues(self) -> tuple[FileOutcome, ...]:
        """Files that failed or could not be classified."""
        return tuple(
            outcome
            for outcome in self.outcomes
            if outcome.failed or outcome.encoding is EncodingLabel.UNKNOWN
        )
