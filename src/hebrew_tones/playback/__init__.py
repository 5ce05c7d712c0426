"""Audio synthesis and playback for Hebrew Tones."""

from hebrew_tones.playback.output import AudioOutput, get_audio_output
from hebrew_tones.playback.scheduler import PlaybackBatch, PlaybackScheduler, build_schedule
from hebrew_tones.playback.synth import Limiter, render_schedule, synthesize_tone, write_audio

__all__ = [
    "AudioOutput",
    "Limiter",
    "PlaybackBatch",
    "PlaybackScheduler",
    "build_schedule",
    "get_audio_output",
    "render_schedule",
    "synthesize_tone",
    "write_audio",
]
