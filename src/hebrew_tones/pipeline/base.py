"""Base classes for pipeline stages."""

from abc import ABC, abstractmethod
import logging
import time

from hebrew_tones.models.pipeline import ProcessingContext, StageResult

logger = logging.getLogger(__name__)


class PipelineStage(ABC):
    """Abstract base class for pipeline stages.

    Each stage implements execute() which receives a ProcessingContext,
    performs its work (mutating the context), and returns a StageResult.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Unique name for this stage."""
        ...

    @abstractmethod
    def execute(self, context: ProcessingContext) -> StageResult:
        """Execute this stage.

        Args:
            context: Mutable processing context that accumulates results.

        Returns:
            StageResult indicating success/failure and any warnings.
        """
        ...

    def run(self, context: ProcessingContext) -> StageResult:
        """Run the stage with timing.

        Any exception raised while mapping, expanding or analyzing the text
        is logged with its traceback and returned as a failed result, so a
        bad input never escapes the pipeline.
        """
        start_time = time.perf_counter()
        try:
            result = self.execute(context)
            result.duration_seconds = time.perf_counter() - start_time
            return result
        except Exception as e:
            logger.exception(
                "Stage %s failed on %d characters of text", self.name, len(context.text)
            )
            return StageResult(
                success=False,
                stage_name=self.name,
                duration_seconds=time.perf_counter() - start_time,
                error_message=f"Unexpected error: {e}",
            )
