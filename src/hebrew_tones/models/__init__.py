"""Data models for Hebrew Tones."""

from hebrew_tones.models.letters import LetterMetadata
from hebrew_tones.models.pipeline import ProcessingContext, ProcessingResult, StageResult
from hebrew_tones.models.playback import PlaybackControls, Schedule, ScheduledTone
from hebrew_tones.models.tones import (
    DurationStatistics,
    RangeStatistics,
    SequenceStatistics,
    ToneDescriptor,
    ToneSpec,
)

__all__ = [
    "DurationStatistics",
    "LetterMetadata",
    "PlaybackControls",
    "ProcessingContext",
    "ProcessingResult",
    "RangeStatistics",
    "Schedule",
    "ScheduledTone",
    "SequenceStatistics",
    "StageResult",
    "ToneDescriptor",
    "ToneSpec",
]
