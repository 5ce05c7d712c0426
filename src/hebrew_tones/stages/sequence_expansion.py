"""Sequence expansion stage - one tone descriptor per letter occurrence."""

from collections.abc import Mapping

from hebrew_tones.letters import is_hebrew_letter, lookup
from hebrew_tones.models.pipeline import ProcessingContext, StageResult
from hebrew_tones.models.tones import ToneDescriptor, ToneSpec
from hebrew_tones.pipeline.base import PipelineStage


def generate_tone_descriptors(
    text: str, mapping: Mapping[str, ToneSpec]
) -> list[ToneDescriptor]:
    """Walk text and emit a descriptor for every recognized letter.

    Tones are looked up by letter, so repeated letters share the same
    frequency, duration and amplitude. Characters without metadata, and
    letters missing from the mapping, are skipped.
    """
    descriptors: list[ToneDescriptor] = []
    for char in text:
        metadata = lookup(char)
        if metadata is None:
            continue
        tone = mapping.get(char)
        if tone is None:
            continue
        descriptors.append(ToneDescriptor.from_parts(metadata, tone))
    return descriptors


class SequenceExpansionStage(PipelineStage):
    """Stage 2: Sequence Expansion.

    Joins the letter table with the tone table for each letter in the
    input, preserving input order.
    """

    @property
    def name(self) -> str:
        return "sequence_expansion"

    def execute(self, context: ProcessingContext) -> StageResult:
        """Expand the context's text into its tone sequence."""
        if not context.mapping and any(is_hebrew_letter(c) for c in context.text):
            return StageResult(
                success=False,
                stage_name=self.name,
                duration_seconds=0,
                error_message="No tone mapping available for sequence expansion",
            )

        context.descriptors = generate_tone_descriptors(context.text, context.mapping)

        return StageResult(
            success=True,
            stage_name=self.name,
            duration_seconds=0,
        )
