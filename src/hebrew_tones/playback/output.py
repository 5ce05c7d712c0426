"""Process-wide real-time audio output.

A single PyAudio callback stream mixes every active voice, applies the
volume gain stage and the limiter. The output is opened lazily on first
use and lives for the rest of the process. When PyAudio is not installed
or no output device can be opened, the output stays unavailable and every
emission is ignored.
"""

import logging
import threading
from dataclasses import dataclass
from types import ModuleType

import numpy as np

from hebrew_tones.config import Settings, get_settings
from hebrew_tones.playback.synth import Limiter, synthesize_tone

logger = logging.getLogger(__name__)


@dataclass
class Voice:
    """A tone being played by the output."""

    samples: np.ndarray
    position: int = 0

    @property
    def finished(self) -> bool:
        return self.position >= len(self.samples)


class AudioOutput:
    """Mixing audio output shared by all emissions."""

    def __init__(
        self, settings: Settings | None = None, backend: ModuleType | None = None
    ) -> None:
        """Create an output; no device is touched until open().

        Args:
            settings: Application settings.
            backend: PyAudio-compatible module. Imported on open() when omitted.
        """
        self.settings = settings or get_settings()
        self.sample_rate = self.settings.sample_rate
        self.limiter = Limiter.from_settings(self.settings)

        self._backend = backend
        self._pyaudio = None
        self._stream = None
        self._lock = threading.Lock()
        self._voices: list[Voice] = []
        self._volume = 1.0
        self.unavailable_reason: str | None = None

    @property
    def available(self) -> bool:
        return self._stream is not None

    @property
    def volume(self) -> float:
        return self._volume

    def set_volume(self, volume: float) -> None:
        """Set the output gain applied after mixing, before limiting."""
        if volume < 0:
            raise ValueError(f"volume must not be negative, got {volume}")
        with self._lock:
            self._volume = volume

    @property
    def active_voices(self) -> int:
        with self._lock:
            return len(self._voices)

    def open(self) -> bool:
        """Open the output stream.

        Returns:
            True if the stream is running.
        """
        if self.available:
            return True

        backend = self._backend
        if backend is None:
            try:
                import pyaudio as backend
            except ImportError as e:
                self._mark_unavailable(f"pyaudio not installed: {e}")
                return False
            self._backend = backend

        try:
            self._pyaudio = backend.PyAudio()
            self._stream = self._pyaudio.open(
                format=backend.paFloat32,
                channels=1,
                rate=self.sample_rate,
                output=True,
                frames_per_buffer=self.settings.frames_per_buffer,
                stream_callback=self._callback,
            )
        except (OSError, RuntimeError) as e:
            self._stream = None
            if self._pyaudio is not None:
                self._pyaudio.terminate()
                self._pyaudio = None
            self._mark_unavailable(f"could not open audio output: {e}")
            return False

        logger.info("Audio output opened at %d Hz", self.sample_rate)
        return True

    def emit(self, frequency: float, duration: float, amplitude: float) -> bool:
        """Start playing a tone immediately.

        Args:
            frequency: Tone frequency in Hz.
            duration: Audible length in seconds.
            amplitude: Envelope start value.

        Returns:
            True if the tone was queued, False if the output is unavailable.
        """
        if not self.available:
            logger.debug("Audio output unavailable, dropping %.1f Hz tone", frequency)
            return False

        samples = synthesize_tone(
            frequency,
            duration,
            amplitude,
            sample_rate=self.sample_rate,
            floor=self.settings.envelope_floor,
        )
        if samples.size == 0:
            return True

        with self._lock:
            self._voices.append(Voice(samples=samples))
        return True

    def mix(self, frame_count: int) -> np.ndarray:
        """Produce the next block of output samples.

        Sums the active voices, drops finished ones, applies volume and
        the limiter.
        """
        block = np.zeros(frame_count, dtype=float)
        with self._lock:
            for voice in self._voices:
                chunk = voice.samples[voice.position : voice.position + frame_count]
                block[: len(chunk)] += chunk
                voice.position += len(chunk)
            self._voices = [v for v in self._voices if not v.finished]
            volume = self._volume

        block *= volume
        block = self.limiter.process(block)
        return np.clip(block, -1.0, 1.0).astype(np.float32)

    def _callback(self, in_data, frame_count, time_info, status):
        """PyAudio callback - runs on the audio thread."""
        return (self.mix(frame_count).tobytes(), self._backend.paContinue)

    def _mark_unavailable(self, reason: str) -> None:
        self.unavailable_reason = reason
        logger.warning("Audio playback disabled: %s", reason)


# Global output instance
_output: AudioOutput | None = None
_output_lock = threading.Lock()


def get_audio_output(settings: Settings | None = None) -> AudioOutput:
    """Get the process-wide audio output, opening it on first use."""
    global _output
    with _output_lock:
        if _output is None:
            _output = AudioOutput(settings)
            _output.open()
        return _output
