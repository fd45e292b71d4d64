"""Slot reconciliation: assign a day's raw scans to schedule windows.

Every scan goes to at most one window. Candidates are the windows whose
grace-extended interval ``[start - G, end + G]`` contains the scan. A scan
inside a window's core ``[start, end]`` (strict match) always beats a scan that
only reaches a window through the grace buffer; within the same kind the window
whose start is nearest wins, and on equal distance the earlier window in input
order keeps the scan.

Two fully overlapping windows can therefore never share a scan: the first one
by order receives it and the other is reported missing.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

from ..common.time_utils import ScanTime
from ..common.validators import require_grace_minutes
from ..core.constants import DEFAULT_GRACE_MINUTES
from ..core.enums import MatchKind
from ..schedules.model import ScheduleWindow
from ..schedules.service import require_sorted
from .factory import SlotStatusFactory
from .model import ReconciliationResult, ScanEvent

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SlotMatch:
    index: int
    kind: MatchKind
    distance: int  # seconds


class SlotReconciler:
    def __init__(self, grace_minutes: float = DEFAULT_GRACE_MINUTES, *, status_factory: SlotStatusFactory | None = None):
        self._grace = require_grace_minutes(grace_minutes)
        self._factory = status_factory or SlotStatusFactory()

    @property
    def grace_minutes(self) -> float:
        return self._grace

    def reconcile(self, windows: Sequence[ScheduleWindow], scans: Iterable[ScanEvent]) -> list[ReconciliationResult]:
        """Return one result per window, in the order of ``windows``.

        ``windows`` must already be sorted ascending by start.
        """
        windows = list(windows)
        require_sorted(windows)

        assigned: list[list[ScanTime]] = [[] for _ in windows]
        for scan in sorted(scans):
            match = self.best_match(windows, scan.time)
            if match is None:
                logger.debug("Bỏ qua lần quét %s: không thuộc tiết nào", scan.time)
                continue
            assigned[match.index].append(scan.time)

        return [self._to_result(window, log) for window, log in zip(windows, assigned)]

    def best_match(self, windows: Sequence[ScheduleWindow], time: ScanTime) -> Optional[SlotMatch]:
        second = time.seconds_of_day
        grace = self._grace * 60
        best: Optional[SlotMatch] = None

        for index, window in enumerate(windows):
            start, end = window.start * 60, window.end * 60
            if not (start - grace <= second <= end + grace):
                continue

            kind = MatchKind.STRICT if start <= second <= end else MatchKind.BUFFER
            distance = abs(second - start)

            if kind is MatchKind.STRICT:
                if best is None or best.kind is MatchKind.BUFFER or distance < best.distance:
                    best = SlotMatch(index, kind, distance)
            elif best is None or (best.kind is MatchKind.BUFFER and distance < best.distance):
                best = SlotMatch(index, kind, distance)

        return best

    def _to_result(self, window: ScheduleWindow, log: list[ScanTime]) -> ReconciliationResult:
        distinct = _dedupe(log)
        check_in = distinct[0] if distinct else None
        check_out = distinct[-1] if len(distinct) > 1 else None

        strategy = self._factory.for_slot(window=window, check_in=check_in, grace_minutes=self._grace)
        decision = strategy.decide(window=window, check_in=check_in, grace_minutes=self._grace)
        return ReconciliationResult(
            window=window,
            check_in=check_in,
            check_out=check_out,
            status=decision.status,
            note=decision.note,
        )


def _dedupe(log: list[ScanTime]) -> list[ScanTime]:
    out: list[ScanTime] = []
    for t in log:
        if t not in out:
            out.append(t)
    return out


def reconcile(
    windows: Sequence[ScheduleWindow],
    scans: Iterable[ScanEvent],
    *,
    grace_minutes: float = DEFAULT_GRACE_MINUTES,
) -> list[ReconciliationResult]:
    return SlotReconciler(grace_minutes).reconcile(windows, scans)
