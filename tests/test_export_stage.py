"""Tests for the ExportStage."""

import json
from pathlib import Path

from hebrew_tones import __version__
from hebrew_tones.models.pipeline import ProcessingContext
from hebrew_tones.pipeline import create_default_pipeline
from hebrew_tones.stages.export import ExportStage


class TestExportStage:
    """Tests for ExportStage."""

    def test_stage_name(self):
        """Stage has correct name."""
        assert ExportStage().name == "export"

    def test_requires_output_dir(self):
        """Returns error when no output directory is set."""
        result = ExportStage().execute(ProcessingContext(text="אבא"))

        assert result.success is False
        assert "no output directory" in result.error_message.lower()

    def test_creates_analysis_json(self, tmp_path: Path, settings):
        """Full pipeline with export writes analysis.json."""
        pipeline = create_default_pipeline(settings, export=True)

        result = pipeline.run("אבא", output_dir=tmp_path / "output")

        assert result.success is True
        assert result.stages_completed[-1] == "export"
        assert result.context.analysis_path == tmp_path / "output" / "analysis.json"
        assert result.context.analysis_path.exists()

    def test_analysis_json_structure(self, tmp_path: Path, settings):
        """analysis.json uses camelCase keys and keeps Hebrew text readable."""
        pipeline = create_default_pipeline(settings, export=True)
        result = pipeline.run("אבא", output_dir=tmp_path)

        raw = result.context.analysis_path.read_text(encoding="utf-8")
        data = json.loads(raw)

        assert "אבא" in raw
        assert data["text"] == "אבא"
        assert data["converterVersion"] == __version__
        assert "processingDate" in data
        assert data["letterCounts"] == {"א": 2, "ב": 1}
        assert list(data["mapping"]) == ["א", "ב"]
        assert data["mapping"]["א"]["frequency"] == 20.0

        assert len(data["descriptors"]) == 3
        first = data["descriptors"][0]
        assert first["symbol"] == "א"
        assert first["displayName"] == "Alef"
        assert first["numericValue"] == 1
        assert first["meaning"] == "Ox, Leader"

        assert data["statistics"]["frequency"]["max"] == 30.0
        assert set(data["statistics"]["duration"]) == {"total", "average", "median"}

    def test_empty_text_exports_null_statistics(self, tmp_path: Path, settings):
        """Text without letters exports empty collections and null statistics."""
        pipeline = create_default_pipeline(settings, export=True)
        result = pipeline.run("hello", output_dir=tmp_path)

        data = json.loads(result.context.analysis_path.read_text(encoding="utf-8"))

        assert data["descriptors"] == []
        assert data["mapping"] == {}
        assert data["statistics"]["frequency"]["average"] is None
        assert data["statistics"]["duration"]["total"] == 0.0

    def test_build_document_without_statistics(self):
        """build_document computes statistics when the context lacks them."""
        context = ProcessingContext(text="")
        document = ExportStage().build_document(context)
        assert document["statistics"]["amplitude"]["min"] is None
