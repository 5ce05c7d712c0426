"""Frequency mapping stage - assigns a tone to each distinct letter."""

from collections import Counter

from hebrew_tones.letters import lookup
from hebrew_tones.models.pipeline import ProcessingContext, StageResult
from hebrew_tones.models.tones import ToneSpec
from hebrew_tones.pipeline.base import PipelineStage

# Rank 0 (the most common letter) sounds at BASE_FREQUENCY, each following
# rank FREQUENCY_STEP higher.
BASE_FREQUENCY = 20  # Hz
FREQUENCY_STEP = 10  # Hz


def count_letters(text: str) -> Counter[str]:
    """Count recognized letters, in first-encountered order."""
    return Counter(char for char in text if lookup(char) is not None)


def generate_frequency_mapping(text: str) -> dict[str, ToneSpec]:
    """Map each distinct letter in text to a ToneSpec.

    Letters are ranked by descending share of all recognized letter
    occurrences; equal shares keep the order in which the letters first
    appear in the text. For rank index i:

        frequency = 20 + 10 * i                  (Hz)
        duration  = 0.1 * (numeric_value / 10)   (seconds)
        amplitude = 0.1 * (1 - share)

    Characters that are not letters are ignored entirely. Text without any
    letters yields an empty mapping.

    Args:
        text: Raw input text.

    Returns:
        Dict from letter to ToneSpec, iterating in rank order.
    """
    counts = count_letters(text)
    total = sum(counts.values())
    if total == 0:
        return {}

    shares = {letter: count / total for letter, count in counts.items()}
    # sorted() is stable, so ties keep first-encountered order
    ranked = sorted(shares, key=lambda letter: shares[letter], reverse=True)

    mapping: dict[str, ToneSpec] = {}
    for i, letter in enumerate(ranked):
        metadata = lookup(letter)
        assert metadata is not None  # counted letters always have metadata
        mapping[letter] = ToneSpec(
            frequency=float(BASE_FREQUENCY + FREQUENCY_STEP * i),
            duration=0.1 * (metadata.numeric_value / 10),
            amplitude=0.1 * (1 - shares[letter]),
        )
    return mapping


class FrequencyMappingStage(PipelineStage):
    """Stage 1: Frequency Mapping.

    Counts letter occurrences in the input text and builds the tone table
    used by every later stage.
    """

    @property
    def name(self) -> str:
        return "frequency_mapping"

    def execute(self, context: ProcessingContext) -> StageResult:
        """Build the tone table for the context's text."""
        warnings: list[str] = []

        context.letter_counts = dict(count_letters(context.text))
        context.mapping = generate_frequency_mapping(context.text)

        if not context.mapping:
            warnings.append("No Hebrew letters found in text")

        return StageResult(
            success=True,
            stage_name=self.name,
            duration_seconds=0,
            warnings=warnings,
        )
