"""Tone data models for Hebrew Tones.

These models represent the tone mapping, the per-occurrence tone sequence,
and the statistics reported over that sequence.
"""

from dataclasses import dataclass

from hebrew_tones.models.letters import LetterMetadata


@dataclass(frozen=True)
class ToneSpec:
    """Synthesized tone parameters for one distinct letter."""

    frequency: float  # Hz
    duration: float  # seconds (at 1.0x speed)
    amplitude: float  # 0.0-0.1


@dataclass(frozen=True)
class ToneDescriptor:
    """One letter occurrence: letter metadata joined with its tone."""

    symbol: str
    display_name: str
    numeric_value: int
    meaning: str
    frequency: float
    duration: float
    amplitude: float

    @classmethod
    def from_parts(cls, metadata: LetterMetadata, tone: ToneSpec) -> "ToneDescriptor":
        """Build a descriptor by copying every field of both sources."""
        return cls(
            symbol=metadata.symbol,
            display_name=metadata.display_name,
            numeric_value=metadata.numeric_value,
            meaning=metadata.meaning,
            frequency=tone.frequency,
            duration=tone.duration,
            amplitude=tone.amplitude,
        )

    @property
    def tone(self) -> ToneSpec:
        """The tone part of this descriptor."""
        return ToneSpec(
            frequency=self.frequency,
            duration=self.duration,
            amplitude=self.amplitude,
        )


@dataclass
class RangeStatistics:
    """Average, median and extremes of one numeric field.

    All values are None when computed over an empty sequence.
    """

    average: float | None = None
    median: float | None = None
    min: float | None = None
    max: float | None = None


@dataclass
class DurationStatistics:
    """Total, average and median tone duration in seconds."""

    total: float = 0.0
    average: float | None = None
    median: float | None = None


@dataclass
class SequenceStatistics:
    """Statistics over a whole tone sequence."""

    frequency: RangeStatistics
    duration: DurationStatistics
    amplitude: RangeStatistics

    @property
    def is_empty(self) -> bool:
        return self.frequency.average is None
