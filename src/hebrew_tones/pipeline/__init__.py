"""Pipeline module for Hebrew Tones."""

from hebrew_tones.pipeline.base import PipelineStage
from hebrew_tones.pipeline.orchestrator import Pipeline, create_default_pipeline
from hebrew_tones.pipeline.session import PROCESSING_FAILED_MESSAGE, ConverterSession

__all__ = [
    "PROCESSING_FAILED_MESSAGE",
    "ConverterSession",
    "Pipeline",
    "PipelineStage",
    "create_default_pipeline",
]
