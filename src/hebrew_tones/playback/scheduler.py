"""Playback scheduling - turns a tone sequence into timed emissions."""

import logging
import threading
import time
from collections.abc import Callable, Sequence

from hebrew_tones.config import Settings, get_settings
from hebrew_tones.models.playback import PlaybackControls, Schedule, ScheduledTone
from hebrew_tones.models.tones import ToneDescriptor
from hebrew_tones.playback.output import AudioOutput, get_audio_output

logger = logging.getLogger(__name__)

TimerFactory = Callable[[float, Callable[[], None]], threading.Timer]


def build_schedule(
    descriptors: Sequence[ToneDescriptor], controls: PlaybackControls
) -> Schedule:
    """Lay tones out back to back.

    Tone k starts at (d_0 + ... + d_{k-1}) / speed and sounds for
    d_k / speed seconds. Its envelope starts at the letter's amplitude
    times the amplitude multiplier.

    Raises:
        ValueError: If speed is not positive.
    """
    speed = controls.speed
    if speed <= 0:
        raise ValueError(f"speed must be positive, got {speed}")

    schedule = Schedule(speed=speed)
    elapsed = 0.0
    for index, descriptor in enumerate(descriptors):
        schedule.tones.append(
            ScheduledTone(
                index=index,
                offset=elapsed / speed,
                duration=descriptor.duration / speed,
                frequency=descriptor.frequency,
                amplitude=descriptor.amplitude * controls.amplitude,
                descriptor=descriptor,
            )
        )
        elapsed += descriptor.duration
    return schedule


class PlaybackBatch:
    """Pending timers for one play_sequence() call."""

    def __init__(self, schedule: Schedule) -> None:
        self.schedule = schedule
        self.started_at = time.monotonic()
        self._timers: list[threading.Timer] = []
        self._fired: set[int] = set()
        self._cancelled = False
        self._lock = threading.Lock()

    def add_timer(self, timer: threading.Timer) -> None:
        self._timers.append(timer)

    def start(self) -> None:
        self.started_at = time.monotonic()
        for timer in self._timers:
            timer.start()

    def mark_fired(self, index: int) -> None:
        with self._lock:
            self._fired.add(index)

    @property
    def fired(self) -> int:
        with self._lock:
            return len(self._fired)

    @property
    def pending(self) -> int:
        """Tones not yet emitted and not cancelled."""
        if self._cancelled:
            return 0
        return len(self._timers) - self.fired

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def cancel(self) -> int:
        """Cancel every timer that has not fired yet.

        Returns:
            Number of tones that will no longer play.
        """
        remaining = self.pending
        self._cancelled = True
        for timer in self._timers:
            timer.cancel()
        return remaining

    def wait(self) -> None:
        """Block until the last tone of the schedule has finished sounding."""
        if self._cancelled:
            return
        remaining = self.started_at + self.schedule.total_duration - time.monotonic()
        if remaining > 0:
            time.sleep(remaining)


class PlaybackScheduler:
    """Plays tone sequences and single letters on the shared audio output.

    The output is obtained lazily on first emission, so building schedules
    never touches an audio device.
    """

    def __init__(
        self,
        output: AudioOutput | None = None,
        settings: Settings | None = None,
        timer_factory: TimerFactory = threading.Timer,
    ) -> None:
        """Initialize the scheduler.

        Args:
            output: Audio output to emit on. Defaults to the process-wide one.
            settings: Application settings.
            timer_factory: Creates an unstarted timer for (delay, callback).
        """
        self.settings = settings or get_settings()
        self._output = output
        self._timer_factory = timer_factory
        self._batches: list[PlaybackBatch] = []

    @property
    def output(self) -> AudioOutput:
        if self._output is None:
            self._output = get_audio_output(self.settings)
        return self._output

    def default_controls(self) -> PlaybackControls:
        return PlaybackControls(
            speed=self.settings.default_speed,
            amplitude=self.settings.default_amplitude,
            volume=self.settings.default_volume,
        )

    def play_sequence(
        self,
        descriptors: Sequence[ToneDescriptor],
        controls: PlaybackControls | None = None,
    ) -> PlaybackBatch:
        """Schedule every tone of a sequence.

        Speed is read once here; later control changes do not affect the
        batch. Each tone fires on its own timer.

        Returns:
            The batch, which can be waited on or cancelled.
        """
        controls = controls or self.default_controls()
        schedule = build_schedule(descriptors, controls)

        if self.settings.cancel_on_retrigger:
            self.cancel_all()

        self.output.set_volume(controls.volume)

        batch = PlaybackBatch(schedule)
        for tone in schedule.tones:
            timer = self._timer_factory(tone.offset, self._make_callback(batch, tone))
            timer.daemon = True
            batch.add_timer(timer)

        self._batches = [b for b in self._batches if b.pending > 0]
        self._batches.append(batch)

        batch.start()

        logger.debug(
            "Scheduled %d tones over %.2fs at %.1fx",
            len(schedule),
            schedule.total_duration,
            schedule.speed,
        )
        return batch

    def play_letter(
        self, descriptor: ToneDescriptor, controls: PlaybackControls | None = None
    ) -> bool:
        """Play one letter's tone now, independent of any scheduled batch.

        Returns:
            True if the tone reached the audio output.
        """
        controls = controls or self.default_controls()
        if controls.speed <= 0:
            raise ValueError(f"speed must be positive, got {controls.speed}")

        self.output.set_volume(controls.volume)
        return self.output.emit(
            descriptor.frequency,
            descriptor.duration / controls.speed,
            descriptor.amplitude * controls.amplitude,
        )

    def cancel_all(self) -> int:
        """Cancel all pending tones of every batch.

        Returns:
            Number of tones cancelled.
        """
        cancelled = sum(batch.cancel() for batch in self._batches)
        self._batches = []
        if cancelled:
            logger.debug("Cancelled %d pending tones", cancelled)
        return cancelled

    def _make_callback(
        self, batch: PlaybackBatch, tone: ScheduledTone
    ) -> Callable[[], None]:
        def fire() -> None:
            batch.mark_fired(tone.index)
            self.output.emit(tone.frequency, tone.duration, tone.amplitude)

        return fire
