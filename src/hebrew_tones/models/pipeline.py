"""Pipeline processing models for Hebrew Tones.

These models track state as a text moves through the processing pipeline.
"""

from dataclasses import dataclass, field
from pathlib import Path

from hebrew_tones.models.tones import SequenceStatistics, ToneDescriptor, ToneSpec


@dataclass
class ProcessingContext:
    """Mutable state passed through pipeline stages."""

    # Input
    text: str

    # Letter counts in first-encountered order (Stage 1)
    letter_counts: dict[str, int] = field(default_factory=dict)

    # Tone table keyed by letter, in rank order (Stage 1)
    mapping: dict[str, ToneSpec] = field(default_factory=dict)

    # Per-occurrence tone sequence (Stage 2)
    descriptors: list[ToneDescriptor] = field(default_factory=list)

    # Summary (Stage 3)
    statistics: SequenceStatistics | None = None

    # Export
    output_dir: Path | None = None
    analysis_path: Path | None = None


@dataclass
class StageResult:
    """Result of a pipeline stage execution."""

    success: bool
    stage_name: str
    duration_seconds: float
    error_message: str | None = None
    warnings: list[str] = field(default_factory=list)


@dataclass
class ProcessingResult:
    """Final result of the complete pipeline execution."""

    success: bool
    context: ProcessingContext | None = None
    stages_completed: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    total_duration: float = 0.0
