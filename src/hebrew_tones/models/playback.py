"""Playback models for Hebrew Tones."""

from dataclasses import dataclass, field

from hebrew_tones.models.tones import ToneDescriptor


def _snap(value: float, bounds: tuple[float, float], step: float) -> float:
    """Clamp value to bounds and round it to the nearest step."""
    low, high = bounds
    clamped = min(max(value, low), high)
    return round(round(clamped / step) * step, 2)


@dataclass(frozen=True)
class PlaybackControls:
    """User-adjustable playback multipliers.

    Any positive speed is accepted here; the slider bounds below are what
    the user interface offers.
    """

    speed: float = 1.0
    amplitude: float = 1.0
    volume: float = 1.0

    # Slider bounds and steps
    SPEED_BOUNDS = (0.5, 2.0)
    SPEED_STEP = 0.1
    AMPLITUDE_BOUNDS = (0.1, 2.0)
    AMPLITUDE_STEP = 0.1
    VOLUME_BOUNDS = (0.0, 2.0)
    VOLUME_STEP = 0.01

    def __post_init__(self) -> None:
        if self.speed <= 0:
            raise ValueError(f"speed must be positive, got {self.speed}")
        if self.amplitude < 0:
            raise ValueError(f"amplitude must not be negative, got {self.amplitude}")
        if self.volume < 0:
            raise ValueError(f"volume must not be negative, got {self.volume}")

    @classmethod
    def from_sliders(
        cls, speed: float, amplitude: float, volume: float
    ) -> "PlaybackControls":
        """Build controls from raw slider positions, clamped and snapped to step."""
        return cls(
            speed=_snap(speed, cls.SPEED_BOUNDS, cls.SPEED_STEP),
            amplitude=_snap(amplitude, cls.AMPLITUDE_BOUNDS, cls.AMPLITUDE_STEP),
            volume=_snap(volume, cls.VOLUME_BOUNDS, cls.VOLUME_STEP),
        )

    @property
    def volume_percent(self) -> float:
        """Volume as displayed to the user (2.0 -> 100%)."""
        return self.volume * 50


@dataclass(frozen=True)
class ScheduledTone:
    """A tone placed on the playback timeline."""

    index: int  # position in the descriptor sequence
    offset: float  # seconds from sequence start (speed applied)
    duration: float  # audible seconds (speed applied)
    frequency: float  # Hz
    amplitude: float  # envelope start value (amplitude multiplier applied)
    descriptor: ToneDescriptor


@dataclass
class Schedule:
    """Back-to-back timeline of tones for one playback invocation."""

    speed: float
    tones: list[ScheduledTone] = field(default_factory=list)

    @property
    def total_duration(self) -> float:
        """Seconds from the first tone's start to the last tone's end."""
        if not self.tones:
            return 0.0
        last = self.tones[-1]
        return last.offset + last.duration

    def __len__(self) -> int:
        return len(self.tones)
