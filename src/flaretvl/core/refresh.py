"""Refresh loop holding the latest TVL snapshot.

The loop runs one fetch-and-build cycle on start, then one every
``interval_seconds``. Its state is an immutable DashboardState replaced
wholesale after each cycle; renderers read it and never write it.

States:
    LOADING: initial, empty snapshot, before the first cycle completes.
    READY: at least one cycle completed; later cycles keep this state.

Example:
    loop = RefreshLoop(service.load_snapshot, interval_seconds=60)
    loop.start()
    ...
    await loop.stop()
"""

from __future__ import annotations

import asyncio
import contextlib
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import Enum

import structlog

from flaretvl.core.tvl.models import Snapshot

log = structlog.get_logger(__name__)

SnapshotLoader = Callable[[], Awaitable[Snapshot]]


class LoopPhase(str, Enum):
    """Refresh loop phases."""

    LOADING = "loading"
    READY = "ready"


@dataclass(frozen=True)
class DashboardState:
    """Immutable view of the loop's held data, passed to renderers."""

    phase: LoopPhase = LoopPhase.LOADING
    snapshot: Snapshot = field(default_factory=Snapshot.empty)
    refreshed_at: datetime | None = None
    refresh_count: int = 0

    @property
    def loading(self) -> bool:
        """True until the first snapshot is available."""
        return self.phase == LoopPhase.LOADING


class RefreshLoop:
    """Periodic fetch-and-build driver with an explicit cancellation handle.

    Attributes:
        interval_seconds: Delay between the end of one cycle and the next.
    """

    def __init__(self, load_snapshot: SnapshotLoader, interval_seconds: float = 60.0) -> None:
        if interval_seconds <= 0:
            raise ValueError("interval_seconds must be positive")
        self._load_snapshot = load_snapshot
        self.interval_seconds = interval_seconds
        self._state = DashboardState()
        self._task: asyncio.Task[None] | None = None
        self._stopped = False

    @property
    def state(self) -> DashboardState:
        """Latest state; safe to read at any time."""
        return self._state

    @property
    def running(self) -> bool:
        """True while the scheduled task is alive."""
        return self._task is not None and not self._task.done()

    @property
    def stopped(self) -> bool:
        """True once stop() has been called."""
        return self._stopped

    async def refresh_once(self) -> DashboardState:
        """Run one fetch-and-build cycle and replace the held state.

        Returns:
            The new state.
        """
        snapshot = await self._load_snapshot()
        previous = self._state
        self._state = DashboardState(
            phase=LoopPhase.READY,
            snapshot=snapshot,
            refreshed_at=datetime.now(UTC),
            refresh_count=previous.refresh_count + 1,
        )
        if previous.loading:
            log.info("refresh_loop_ready", total_locked_value_usd=snapshot.total_locked_value_usd)
        else:
            log.debug("refresh_loop_refreshed", refresh_count=self._state.refresh_count)
        return self._state

    def start(self) -> asyncio.Task[None]:
        """Schedule the loop on the running event loop.

        Returns:
            The scheduled task.

        Raises:
            RuntimeError: If already started or already stopped.
        """
        if self._stopped:
            raise RuntimeError("Refresh loop has been stopped")
        if self._task is not None:
            raise RuntimeError("Refresh loop already started")

        self._task = asyncio.create_task(self._run(), name="flaretvl-refresh-loop")
        log.info("refresh_loop_started", interval_seconds=self.interval_seconds)
        return self._task

    async def stop(self) -> None:
        """Cancel the scheduled task. Later calls are no-ops.

        An in-flight cycle is discarded: its result never reaches the state.
        """
        if self._stopped:
            return
        self._stopped = True

        task, self._task = self._task, None
        if task is None:
            log.info("refresh_loop_stopped", refresh_count=self._state.refresh_count)
            return

        task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await task
        log.info("refresh_loop_stopped", refresh_count=self._state.refresh_count)

    async def _run(self) -> None:
        while True:
            try:
                await self.refresh_once()
            except Exception as e:
                # Keep the previous state and try again on the next tick
                log.error("refresh_loop_cycle_failed", error=str(e))
            await asyncio.sleep(self.interval_seconds)
