"""Tests for the FrequencyMappingStage."""

from hebrew_tones.models.pipeline import ProcessingContext
from hebrew_tones.stages.frequency_mapping import (
    FrequencyMappingStage,
    count_letters,
    generate_frequency_mapping,
)


class TestGenerateFrequencyMapping:
    """Tests for generate_frequency_mapping()."""

    def test_empty_text(self):
        """Empty text yields an empty mapping."""
        assert generate_frequency_mapping("") == {}

    def test_text_without_letters(self):
        """Text with no recognized letters yields an empty mapping."""
        assert generate_frequency_mapping("hello, world! 123 ְ ּ") == {}

    def test_single_letter_is_rank_zero(self):
        """A single distinct letter sounds at 20 Hz however often it repeats."""
        for text in ["א", "אא", "אאאאאאא", "א א-א"]:
            mapping = generate_frequency_mapping(text)
            assert list(mapping) == ["א"]
            assert mapping["א"].frequency == 20.0

    def test_single_letter_amplitude_is_zero(self):
        """A letter making up the whole text has share 1 and amplitude 0."""
        mapping = generate_frequency_mapping("בבב")
        assert mapping["ב"].amplitude == 0.0

    def test_more_common_letter_ranks_lower(self):
        """The letter with the higher share gets the lower frequency."""
        mapping = generate_frequency_mapping("בבבא")
        assert mapping["ב"].frequency == 20.0
        assert mapping["א"].frequency == 30.0

    def test_rank_frequencies(self):
        """Frequencies step by 10 Hz per rank."""
        mapping = generate_frequency_mapping("גגגבבא")
        assert [tone.frequency for tone in mapping.values()] == [20.0, 30.0, 40.0]
        assert list(mapping) == ["ג", "ב", "א"]

    def test_ties_keep_first_encountered_order(self):
        """Letters with equal shares rank in order of first appearance."""
        mapping = generate_frequency_mapping("בא")
        assert list(mapping) == ["ב", "א"]
        assert mapping["ב"].frequency == 20.0
        assert mapping["א"].frequency == 30.0

        mapping = generate_frequency_mapping("אב")
        assert list(mapping) == ["א", "ב"]

    def test_duration_from_numeric_value(self):
        """Duration is 0.1 * (numeric value / 10)."""
        mapping = generate_frequency_mapping("אית")
        assert mapping["א"].duration == 0.1 * (1 / 10)
        assert mapping["י"].duration == 0.1 * (10 / 10)
        assert mapping["ת"].duration == 0.1 * (400 / 10)

    def test_amplitude_from_share(self):
        """Amplitude is 0.1 * (1 - share)."""
        mapping = generate_frequency_mapping("אבא")
        assert mapping["א"].amplitude == 0.1 * (1 - 2 / 3)
        assert mapping["ב"].amplitude == 0.1 * (1 - 1 / 3)

    def test_unrecognized_characters_do_not_affect_shares(self):
        """Spaces, vowel points and Latin letters are not counted."""
        plain = generate_frequency_mapping("אבא")
        noisy = generate_frequency_mapping("אָ ב, x א!")
        assert plain == noisy

    def test_invariants(self, genesis_text: str):
        """Frequencies strictly increase with rank; amplitudes stay in [0, 0.1]."""
        mapping = generate_frequency_mapping(genesis_text)
        frequencies = [tone.frequency for tone in mapping.values()]

        assert frequencies == sorted(frequencies)
        assert len(set(frequencies)) == len(frequencies)
        assert all(0 <= tone.amplitude <= 0.1 for tone in mapping.values())
        assert all(tone.duration > 0 for tone in mapping.values())

    def test_deterministic(self, genesis_text: str):
        """The same text always produces the same mapping."""
        assert generate_frequency_mapping(genesis_text) == generate_frequency_mapping(
            genesis_text
        )

    def test_count_letters(self):
        """count_letters counts only recognized letters, in first-seen order."""
        counts = count_letters("שָׁלוֹם ש")
        assert list(counts) == ["ש", "ל", "ו"]
        assert counts["ש"] == 2


class TestFrequencyMappingStage:
    """Tests for FrequencyMappingStage."""

    def test_stage_name(self):
        """Stage has correct name."""
        stage = FrequencyMappingStage()
        assert stage.name == "frequency_mapping"

    def test_populates_context(self):
        """Stage stores counts and mapping on the context."""
        stage = FrequencyMappingStage()
        context = ProcessingContext(text="אבא")

        result = stage.execute(context)

        assert result.success is True
        assert context.letter_counts == {"א": 2, "ב": 1}
        assert set(context.mapping) == {"א", "ב"}

    def test_warns_on_no_letters(self):
        """Stage succeeds with a warning when there are no letters."""
        stage = FrequencyMappingStage()
        context = ProcessingContext(text="no hebrew here")

        result = stage.execute(context)

        assert result.success is True
        assert context.mapping == {}
        assert any("no hebrew letters" in w.lower() for w in result.warnings)
