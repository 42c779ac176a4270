"""
Tests for the summarization client and the summary service pipeline.
"""
import pytest

from summarizer import (
    SourceDocument,
    SummaryMode,
    SummaryGenerator,
    SummaryService,
    extract_text,
    generate_summaries,
    EmptyInputError,
    ExtractionError,
    UnsupportedFileTypeError,
)
from summarizer.exceptions import EMPTY_INPUT_MESSAGE
from summarizer.summary_generator import (
    EMPTY_DOCUMENT_MESSAGE,
    EXTRACTION_INSTRUCTION,
    SUMMARY_FAILURE_MESSAGE,
)


class TestExtractText:

    def test_returns_model_text(self, fake_client):
        doc = SourceDocument(name="scan.jpg", media_type="image/jpeg", data=b"\xff\xd8")
        assert extract_text(doc, fake_client) == "extracted text"

        file_part, instruction = fake_client.extractions[0]
        assert file_part["mime_type"] == "image/jpeg"
        assert file_part["filename"] == "scan.jpg"
        assert instruction == {"type": "text", "text": EXTRACTION_INSTRUCTION}

    def test_failure_names_the_file(self, make_client):
        doc = SourceDocument(name="bad.pdf", media_type="application/pdf", data=b"junk")
        with pytest.raises(ExtractionError) as exc_info:
            extract_text(doc, make_client(fail_extract=True))
        assert exc_info.value.filename == "bad.pdf"

    def test_part_building_failure_is_extraction_error(self, fake_client, monkeypatch):
        def refuse(*args, **kwargs):
            raise ValueError("provider cannot read files")

        monkeypatch.setattr(fake_client, "build_file_part", refuse)
        doc = SourceDocument(name="a.png", media_type="image/png", data=b"\x89PNG")
        with pytest.raises(ExtractionError):
            extract_text(doc, fake_client)


class TestGenerateSummaries:

    def test_returns_model_output(self, fake_client):
        result = generate_summaries("Some contract text", SummaryMode.LEGAL, fake_client)
        assert result == fake_client.summary
        assert len(fake_client.prompts) == 1
        assert "Some contract text" in fake_client.prompts[0]

    @pytest.mark.parametrize("text", ["", "   ", "\n\t"])
    def test_blank_input_makes_no_remote_call(self, fake_client, text):
        assert generate_summaries(text, SummaryMode.LEGAL, fake_client) == EMPTY_DOCUMENT_MESSAGE
        assert fake_client.call_count == 0

    def test_failure_degrades_to_message(self, make_client):
        client = make_client(fail_generate=True)
        assert generate_summaries("text", SummaryMode.DUAL, client) == SUMMARY_FAILURE_MESSAGE

    def test_generator_class_binds_client(self, fake_client):
        generator = SummaryGenerator(fake_client)
        assert generator.generate_summaries("x", SummaryMode.FINANCIAL) == fake_client.summary
        assert "- Mode: [FINANCIAL]" in fake_client.prompts[0]


class TestSummaryService:

    def test_pasted_text_only(self, fake_client):
        service = SummaryService(fake_client)
        assert service.summarize([], "The court held...", SummaryMode.LEGAL) == fake_client.summary
        assert "The court held..." in fake_client.prompts[0]

    def test_files_and_pasted_text_in_one_prompt(self, fake_client):
        service = SummaryService(fake_client)
        docs = [
            SourceDocument(name="a.txt", media_type="text/plain", data=b"alpha"),
            SourceDocument(name="b.pdf", media_type="application/pdf", data=b"%PDF"),
        ]
        service.summarize(docs, "note", SummaryMode.DUAL)

        prompt = fake_client.prompts[0]
        assert prompt.index("START OF a.txt") < prompt.index("START OF OCR'd b.pdf")
        assert prompt.index("START OF OCR'd b.pdf") < prompt.index("--- USER TEXT ---")
        assert len(fake_client.prompts) == 1

    @pytest.mark.parametrize("docs,text", [
        ([], ""),
        ([], "   "),
        ([], None),
    ])
    def test_empty_input_is_rejected(self, fake_client, docs, text):
        service = SummaryService(fake_client)
        with pytest.raises(EmptyInputError) as exc_info:
            service.summarize(docs, text, SummaryMode.LEGAL)
        assert exc_info.value.message == EMPTY_INPUT_MESSAGE
        assert fake_client.prompts == []

    def test_unsupported_file_stops_pipeline(self, fake_client):
        service = SummaryService(fake_client)
        docs = [SourceDocument(name="a.csv", media_type="text/csv", data=b"a,b")]
        with pytest.raises(UnsupportedFileTypeError):
            service.summarize(docs, "also text", SummaryMode.LEGAL)
        assert fake_client.call_count == 0
