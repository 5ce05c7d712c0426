"""Tests for the SequenceExpansionStage."""

from hebrew_tones.models.pipeline import ProcessingContext
from hebrew_tones.models.tones import ToneSpec
from hebrew_tones.stages.frequency_mapping import generate_frequency_mapping
from hebrew_tones.stages.sequence_expansion import (
    SequenceExpansionStage,
    generate_tone_descriptors,
)


class TestGenerateToneDescriptors:
    """Tests for generate_tone_descriptors()."""

    def test_empty_text(self):
        """No letters means no descriptors."""
        assert generate_tone_descriptors("", {}) == []
        assert generate_tone_descriptors("abc 123", generate_frequency_mapping("abc 123")) == []

    def test_preserves_order_and_repeats(self):
        """'אבא' yields Alef, Bet, Alef with identical Alef tones."""
        text = "אבא"
        descriptors = generate_tone_descriptors(text, generate_frequency_mapping(text))

        assert [d.symbol for d in descriptors] == ["א", "ב", "א"]
        first, _, last = descriptors
        assert (first.frequency, first.duration, first.amplitude) == (
            last.frequency,
            last.duration,
            last.amplitude,
        )
        assert first == last

    def test_joins_metadata(self):
        """Descriptors carry letter metadata alongside tone values."""
        descriptors = generate_tone_descriptors("ר", generate_frequency_mapping("ר"))

        (resh,) = descriptors
        assert resh.display_name == "Resh"
        assert resh.numeric_value == 200
        assert resh.meaning == "Head, Highest"
        assert resh.frequency == 20.0
        assert resh.duration == 0.1 * (200 / 10)

    def test_length_matches_recognized_letters(self, genesis_text: str):
        """One descriptor per recognized letter occurrence."""
        descriptors = generate_tone_descriptors(
            genesis_text, generate_frequency_mapping(genesis_text)
        )
        # בראשית ברא אלהים את השמים ואת הארץ, excluding the final forms ם and ץ
        assert len(descriptors) == 6 + 3 + 4 + 2 + 4 + 3 + 3

    def test_skips_letters_missing_from_mapping(self):
        """Letters absent from the mapping are skipped, not errors."""
        mapping = {"א": ToneSpec(frequency=20.0, duration=0.01, amplitude=0.05)}
        descriptors = generate_tone_descriptors("אבא", mapping)
        assert [d.symbol for d in descriptors] == ["א", "א"]


class TestSequenceExpansionStage:
    """Tests for SequenceExpansionStage."""

    def test_stage_name(self):
        """Stage has correct name."""
        stage = SequenceExpansionStage()
        assert stage.name == "sequence_expansion"

    def test_expands_context_text(self):
        """Stage fills context.descriptors."""
        stage = SequenceExpansionStage()
        context = ProcessingContext(text="אבא", mapping=generate_frequency_mapping("אבא"))

        result = stage.execute(context)

        assert result.success is True
        assert len(context.descriptors) == 3

    def test_no_mapping_for_letters(self):
        """Returns error when letters are present but no mapping was built."""
        stage = SequenceExpansionStage()
        context = ProcessingContext(text="אבא")

        result = stage.execute(context)

        assert result.success is False
        assert "no tone mapping" in result.error_message.lower()

    def test_no_letters_no_mapping(self):
        """Text without letters expands to nothing without error."""
        stage = SequenceExpansionStage()
        context = ProcessingContext(text="...")

        result = stage.execute(context)

        assert result.success is True
        assert context.descriptors == []
