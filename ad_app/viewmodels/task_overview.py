"""Task overview chart summary (UI-agnostic)."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable, Mapping

from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger(__name__)

TIME_RANGES = ("monthly", "weekly", "daily")
DEFAULT_TIME_RANGE = "weekly"

_FINISHED_STATUSES = {"completed", "complete", "finished", "done", "closed"}
_IGNORED_STATUSES = {"cancelled", "canceled"}


class ChartSeries(BaseModel):
    name: str
    data: list[float] = Field(default_factory=list)


class TaskOverviewChart(BaseModel):
    """One time range of the task overview payload."""

    on_going: int = Field(default=0, ge=0, alias="onGoing")
    finished: int = Field(default=0, ge=0)
    total: int = Field(default=0, ge=0)
    series: list[ChartSeries] = Field(default_factory=list)
    range: list[str] = Field(default_factory=list)

    model_config = {"populate_by_name": True, "extra": "ignore"}


@dataclass(frozen=True)
class LegendEntry:
    label: str
    value: int


@dataclass(frozen=True)
class TaskOverviewSnapshot:
    time_range: str
    total: int
    legend: list[LegendEntry]
    series: list[ChartSeries]
    x_axis: list[str]


@dataclass(frozen=True)
class TaskStatusSummary:
    total: int
    on_going: int
    finished: int


def summarize_statuses(statuses: Iterable[str]) -> TaskStatusSummary:
    """Count on-going vs finished tasks from raw status strings."""
    on_going = finished = 0
    for status in statuses:
        normalized = (status or "").strip().lower()
        if normalized in _IGNORED_STATUSES:
            continue
        if normalized in _FINISHED_STATUSES:
            finished += 1
        else:
            on_going += 1
    return TaskStatusSummary(total=on_going + finished, on_going=on_going, finished=finished)


class TaskOverviewViewModel:
    """Select a time range and build the chart legend for it."""

    def __init__(
        self,
        chart: Mapping[str, Any] | None = None,
        time_range: str = DEFAULT_TIME_RANGE,
    ) -> None:
        self._charts: dict[str, TaskOverviewChart] = {}
        self._time_range = DEFAULT_TIME_RANGE
        self._loading = False
        self.set_time_range(time_range)
        if chart:
            self.update(chart)

    @property
    def time_range(self) -> str:
        return self._time_range

    @property
    def loading(self) -> bool:
        return self._loading

    def set_loading(self, loading: bool) -> None:
        self._loading = loading

    def set_time_range(self, time_range: str) -> None:
        if time_range not in TIME_RANGES:
            raise ValueError(
                f"Unknown time range {time_range!r}; expected one of {', '.join(TIME_RANGES)}"
            )
        self._time_range = time_range

    def update(self, chart: Mapping[str, Any]) -> None:
        """Replace chart data; ranges that fail validation are skipped."""
        charts: dict[str, TaskOverviewChart] = {}
        for name, raw in chart.items():
            try:
                charts[name] = TaskOverviewChart.model_validate(raw)
            except ValidationError as exc:
                logger.warning("Skipping invalid task chart %r: %s", name, exc.error_count())
                continue
        self._charts = charts
        self._loading = False

    def snapshot(self) -> TaskOverviewSnapshot | None:
        if self._loading:
            return None
        chart = self._charts.get(self._time_range)
        if chart is None:
            return None
        counts = (chart.on_going, chart.finished)
        legend = [
            LegendEntry(label=series.name, value=value)
            for series, value in zip(chart.series, counts)
        ]
        return TaskOverviewSnapshot(
            time_range=self._time_range,
            total=chart.total,
            legend=legend,
            series=list(chart.series),
            x_axis=list(chart.range),
        )
