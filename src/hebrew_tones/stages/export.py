"""Export stage - writes analysis.json for the processed text."""

import json
from dataclasses import asdict
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from hebrew_tones import __version__
from hebrew_tones.models.pipeline import ProcessingContext, StageResult
from hebrew_tones.pipeline.base import PipelineStage
from hebrew_tones.stages.statistics import analyze_sequence


class ExportStage(PipelineStage):
    """Stage 4: Export.

    Serializes the tone table, the tone sequence and its statistics to
    analysis.json in the context's output directory. Field names are
    converted to camelCase.

    Output structure:
    {
      "text": "...",
      "processingDate": "...",
      "converterVersion": "0.1.0",
      "letterCounts": {"א": 2, ...},
      "mapping": {"א": {"frequency": 20.0, "duration": 0.01, "amplitude": 0.03}, ...},
      "descriptors": [{"symbol": "א", "displayName": "Alef", ...}, ...],
      "statistics": {"frequency": {...}, "duration": {...}, "amplitude": {...}}
    }
    """

    FILENAME = "analysis.json"

    @property
    def name(self) -> str:
        return "export"

    def execute(self, context: ProcessingContext) -> StageResult:
        """Write analysis.json."""
        warnings: list[str] = []

        if context.output_dir is None:
            return StageResult(
                success=False,
                stage_name=self.name,
                duration_seconds=0,
                error_message="No output directory set for export",
            )

        try:
            document = self.build_document(context)

            context.output_dir.mkdir(parents=True, exist_ok=True)
            analysis_path = context.output_dir / self.FILENAME
            with open(analysis_path, "w", encoding="utf-8") as f:
                json.dump(document, f, indent=2, ensure_ascii=False)

            context.analysis_path = analysis_path
            warnings.append(f"Wrote {analysis_path}")

        except OSError as e:
            return StageResult(
                success=False,
                stage_name=self.name,
                duration_seconds=0,
                error_message=f"Failed to write analysis: {e}",
            )

        return StageResult(
            success=True,
            stage_name=self.name,
            duration_seconds=0,
            warnings=warnings,
        )

    def build_document(self, context: ProcessingContext) -> dict[str, Any]:
        """Build the JSON-serializable analysis document for a context."""
        statistics = context.statistics or analyze_sequence(context.descriptors)
        return self._convert_dict_keys(
            {
                "text": context.text,
                "processing_date": datetime.now(timezone.utc).isoformat(),
                "converter_version": __version__,
                "letter_counts": context.letter_counts,
                "mapping": {
                    letter: asdict(tone) for letter, tone in context.mapping.items()
                },
                "descriptors": [asdict(d) for d in context.descriptors],
                "statistics": asdict(statistics),
            }
        )

    def _convert_dict_keys(self, d: dict) -> dict:
        """Recursively convert dict keys from snake_case to camelCase.

        Args:
            d: Dictionary with snake_case keys

        Returns:
            Dictionary with camelCase keys
        """
        result = {}
        for key, value in d.items():
            if isinstance(key, str) and "_" in key:
                camel_key = self._to_camel_case(key)
            else:
                camel_key = key

            result[camel_key] = self._process_value(value)
        return result

    def _process_value(self, value):
        if isinstance(value, dict):
            return self._convert_dict_keys(value)
        elif isinstance(value, list):
            return [self._process_value(item) for item in value]
        elif isinstance(value, tuple):
            return list(value)
        elif isinstance(value, Path):
            return str(value)
        else:
            return value

    def _to_camel_case(self, snake_str: str) -> str:
        components = snake_str.split("_")
        return components[0] + "".join(x.title() for x in components[1:])
