"""Recompute-on-change session over the processing pipeline."""

import logging

from hebrew_tones.config import Settings, get_settings
from hebrew_tones.models.tones import SequenceStatistics, ToneDescriptor, ToneSpec
from hebrew_tones.pipeline.orchestrator import Pipeline, create_default_pipeline

logger = logging.getLogger(__name__)

PROCESSING_FAILED_MESSAGE = (
    "An error occurred while processing the text. Please try again."
)


class ConverterSession:
    """Holds the results for the current text.

    Every update recomputes everything from scratch. When a computation
    fails, the previous results stay in place and ``error`` carries a
    generic message until the next successful update.
    """

    def __init__(
        self, pipeline: Pipeline | None = None, settings: Settings | None = None
    ) -> None:
        self.settings = settings or get_settings()
        self.pipeline = pipeline or create_default_pipeline(self.settings)

        self.text: str = ""
        self.mapping: dict[str, ToneSpec] = {}
        self.descriptors: list[ToneDescriptor] = []
        self.statistics: SequenceStatistics | None = None
        self.error: str | None = None

    def update(self, text: str) -> bool:
        """Recompute all results for a new text.

        Returns:
            True if the results now reflect ``text``.
        """
        result = self.pipeline.run(text)

        if not result.success or result.context is None:
            logger.error("Error processing text: %s", "; ".join(result.errors))
            self.error = PROCESSING_FAILED_MESSAGE
            return False

        context = result.context
        self.text = text
        self.mapping = context.mapping
        self.descriptors = context.descriptors
        self.statistics = context.statistics
        self.error = None
        return True
