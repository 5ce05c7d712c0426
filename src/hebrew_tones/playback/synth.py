"""Tone synthesis, dynamics limiting and offline rendering."""

import math
from pathlib import Path

import numpy as np
import soundfile as sf

from hebrew_tones.config import Settings
from hebrew_tones.models.playback import Schedule


def decay_envelope(start: float, n_samples: int, floor: float) -> np.ndarray:
    """Exponential decay from ``start`` to ``floor`` over ``n_samples``.

    The last sample is exactly ``floor``. A start value at or below the
    floor cannot decay toward it and is held constant instead.
    """
    if n_samples <= 0:
        return np.zeros(0)
    if start <= floor:
        return np.full(n_samples, start, dtype=float)
    if n_samples == 1:
        return np.array([start], dtype=float)
    progress = np.arange(n_samples) / (n_samples - 1)
    return start * (floor / start) ** progress


def synthesize_tone(
    frequency: float,
    duration: float,
    amplitude: float,
    sample_rate: int = 44100,
    floor: float = 0.001,
) -> np.ndarray:
    """Render a decaying sine tone.

    Args:
        frequency: Tone frequency in Hz.
        duration: Audible length in seconds (speed already applied).
        amplitude: Envelope start value.
        sample_rate: Samples per second.
        floor: Envelope value at the end of the tone.

    Returns:
        Mono float64 samples.
    """
    n_samples = int(duration * sample_rate)
    t = np.arange(n_samples) / sample_rate
    envelope = decay_envelope(amplitude, n_samples, floor)
    return envelope * np.sin(2 * math.pi * frequency * t)


class Limiter:
    """Feed-forward compressor used as the output's dynamics limiting stage.

    Gain reduction follows a soft-knee static curve and is smoothed with
    separate attack and release time constants. State is kept between
    calls to ``process`` so consecutive blocks of a stream join smoothly.
    """

    def __init__(
        self,
        threshold_db: float = -24.0,
        knee_db: float = 30.0,
        ratio: float = 12.0,
        attack: float = 0.0,
        release: float = 0.25,
        sample_rate: int = 44100,
    ) -> None:
        self.threshold_db = threshold_db
        self.knee_db = knee_db
        self.ratio = ratio
        self.attack_coeff = self._coefficient(attack, sample_rate)
        self.release_coeff = self._coefficient(release, sample_rate)
        self._gain_db = 0.0

    @classmethod
    def from_settings(cls, settings: Settings) -> "Limiter":
        return cls(
            threshold_db=settings.limiter_threshold_db,
            knee_db=settings.limiter_knee_db,
            ratio=settings.limiter_ratio,
            attack=settings.limiter_attack,
            release=settings.limiter_release,
            sample_rate=settings.sample_rate,
        )

    @staticmethod
    def _coefficient(time_constant: float, sample_rate: int) -> float:
        # A zero time constant reacts within one sample
        if time_constant <= 0:
            return 0.0
        return math.exp(-1.0 / (time_constant * sample_rate))

    def static_gain_db(self, level_db: np.ndarray) -> np.ndarray:
        """Target gain (<= 0 dB) for each input level."""
        over = level_db - self.threshold_db
        half_knee = self.knee_db / 2
        slope = 1.0 / self.ratio - 1.0

        gain = np.zeros_like(level_db)
        if self.knee_db > 0:
            in_knee = np.abs(over) <= half_knee
            gain[in_knee] = slope * (over[in_knee] + half_knee) ** 2 / (2 * self.knee_db)
        above = over > half_knee
        gain[above] = slope * over[above]
        return gain

    def process(self, samples: np.ndarray) -> np.ndarray:
        """Apply gain reduction to a block of samples."""
        if samples.size == 0:
            return samples
        level_db = 20 * np.log10(np.abs(samples) + 1e-12)
        targets = self.static_gain_db(level_db)

        smoothed = np.empty_like(targets)
        state = self._gain_db
        attack, release = self.attack_coeff, self.release_coeff
        for i, target in enumerate(targets.tolist()):
            coeff = attack if target < state else release
            state = coeff * state + (1 - coeff) * target
            smoothed[i] = state
        self._gain_db = state

        return samples * 10 ** (smoothed / 20)

    def reset(self) -> None:
        self._gain_db = 0.0


def render_schedule(
    schedule: Schedule, volume: float, settings: Settings
) -> np.ndarray:
    """Mix every tone of a schedule into one buffer.

    Tones are placed at their offsets, the sum is scaled by ``volume`` and
    passed through a fresh limiter.

    Returns:
        Mono float32 samples in [-1, 1].
    """
    sample_rate = settings.sample_rate
    total = int(math.ceil(schedule.total_duration * sample_rate))
    mix = np.zeros(total, dtype=float)

    for tone in schedule.tones:
        samples = synthesize_tone(
            tone.frequency,
            tone.duration,
            tone.amplitude,
            sample_rate=sample_rate,
            floor=settings.envelope_floor,
        )
        start = min(int(round(tone.offset * sample_rate)), total)
        end = min(start + len(samples), total)
        mix[start:end] += samples[: end - start]

    mix *= volume
    mix = Limiter.from_settings(settings).process(mix)
    return np.clip(mix, -1.0, 1.0).astype(np.float32)


def write_audio(path: Path, samples: np.ndarray, sample_rate: int) -> Path:
    """Write mono samples to an audio file; format follows the extension."""
    path.parent.mkdir(parents=True, exist_ok=True)
    sf.write(path, samples, sample_rate)
    return path
