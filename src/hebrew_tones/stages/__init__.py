"""Pipeline stages for Hebrew Tones."""

from hebrew_tones.stages.export import ExportStage
from hebrew_tones.stages.frequency_mapping import FrequencyMappingStage, generate_frequency_mapping
from hebrew_tones.stages.sequence_expansion import (
    SequenceExpansionStage,
    generate_tone_descriptors,
)
from hebrew_tones.stages.statistics import StatisticsStage, analyze_sequence

__all__ = [
    "ExportStage",
    "FrequencyMappingStage",
    "SequenceExpansionStage",
    "StatisticsStage",
    "analyze_sequence",
    "generate_frequency_mapping",
    "generate_tone_descriptors",
]
