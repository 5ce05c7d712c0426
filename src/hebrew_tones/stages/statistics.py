"""Statistics stage - summarizes the tone sequence."""

from collections.abc import Sequence

import numpy as np

from hebrew_tones.models.pipeline import ProcessingContext, StageResult
from hebrew_tones.models.tones import (
    DurationStatistics,
    RangeStatistics,
    SequenceStatistics,
    ToneDescriptor,
)
from hebrew_tones.pipeline.base import PipelineStage


def median(values: Sequence[float]) -> float | None:
    """Middle value of the sorted values; mean of the two middle ones for even counts."""
    if not values:
        return None
    ordered = sorted(values)
    mid = len(ordered) // 2
    if len(ordered) % 2:
        return ordered[mid]
    return (ordered[mid - 1] + ordered[mid]) / 2


def average(values: Sequence[float]) -> float | None:
    if not values:
        return None
    return sum(values) / len(values)


def _range_statistics(values: list[float]) -> RangeStatistics:
    if not values:
        return RangeStatistics()
    array = np.asarray(values, dtype=float)
    return RangeStatistics(
        average=average(values),
        median=median(values),
        min=float(array.min()),
        max=float(array.max()),
    )


def analyze_sequence(descriptors: Sequence[ToneDescriptor]) -> SequenceStatistics:
    """Compute statistics over every tone occurrence.

    Repeated letters count once per occurrence, so frequent letters weigh
    more. For an empty sequence all averages, medians and extremes are
    None and the total duration is 0.0.
    """
    frequencies = [d.frequency for d in descriptors]
    durations = [d.duration for d in descriptors]
    amplitudes = [d.amplitude for d in descriptors]

    return SequenceStatistics(
        frequency=_range_statistics(frequencies),
        duration=DurationStatistics(
            total=float(sum(durations)),
            average=average(durations),
            median=median(durations),
        ),
        amplitude=_range_statistics(amplitudes),
    )


class StatisticsStage(PipelineStage):
    """Stage 3: Statistics.

    Computes frequency, duration and amplitude summaries of the expanded
    tone sequence.
    """

    @property
    def name(self) -> str:
        return "statistics"

    def execute(self, context: ProcessingContext) -> StageResult:
        """Summarize the context's tone sequence."""
        warnings: list[str] = []

        context.statistics = analyze_sequence(context.descriptors)

        if context.statistics.is_empty:
            warnings.append("Empty tone sequence - statistics are undefined")

        return StageResult(
            success=True,
            stage_name=self.name,
            duration_seconds=0,
            warnings=warnings,
        )
