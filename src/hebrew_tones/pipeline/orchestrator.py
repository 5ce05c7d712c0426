"""Pipeline orchestrator for Hebrew Tones."""

import time
from pathlib import Path

from rich.console import Console

from hebrew_tones.config import Settings
from hebrew_tones.models.pipeline import ProcessingContext, ProcessingResult
from hebrew_tones.pipeline.base import PipelineStage


class Pipeline:
    """Orchestrates the execution of pipeline stages."""

    def __init__(
        self,
        stages: list[PipelineStage],
        settings: Settings,
        console: Console | None = None,
    ) -> None:
        """Initialize the pipeline.

        Args:
            stages: Ordered list of stages to execute.
            settings: Application settings.
            console: Console for per-stage progress lines. Nothing is
                printed when omitted.
        """
        self.stages = stages
        self.settings = settings
        self.console = console

    def run(self, text: str, output_dir: Path | None = None) -> ProcessingResult:
        """Run the full pipeline on a text.

        Args:
            text: Input text.
            output_dir: Directory for exported files, if the pipeline exports.

        Returns:
            ProcessingResult with success status and the processing context.
        """
        start_time = time.perf_counter()

        context = ProcessingContext(text=text, output_dir=output_dir)
        result = ProcessingResult(success=True, context=context)

        for stage in self.stages:
            stage_result = stage.run(context)

            if stage_result.success:
                result.stages_completed.append(stage.name)
                result.warnings.extend(stage_result.warnings)
                self._print(
                    f"  [green]{stage.name}[/green] "
                    f"({stage_result.duration_seconds * 1000:.1f}ms)"
                )
            else:
                result.success = False
                result.errors.append(f"{stage.name}: {stage_result.error_message}")
                self._print(
                    f"  [red]{stage.name}[/red] failed: "
                    f"{stage_result.error_message}"
                )
                break

        result.total_duration = time.perf_counter() - start_time
        return result

    def _print(self, message: str) -> None:
        if self.console is not None:
            self.console.print(message)


def create_default_pipeline(
    settings: Settings, export: bool = False, console: Console | None = None
) -> Pipeline:
    """Create a pipeline with all default stages.

    Args:
        settings: Application settings.
        export: Append the stage that writes analysis.json.
        console: Optional console for progress output.

    Returns:
        Configured Pipeline instance.
    """
    from hebrew_tones.stages import (
        ExportStage,
        FrequencyMappingStage,
        SequenceExpansionStage,
        StatisticsStage,
    )

    stages: list[PipelineStage] = [
        FrequencyMappingStage(),
        SequenceExpansionStage(),
        StatisticsStage(),
    ]
    if export:
        stages.append(ExportStage())

    return Pipeline(stages, settings, console=console)
