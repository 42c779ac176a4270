"""
Tests for turning uploads and pasted text into the combined source text.
"""
import base64

import pytest

from summarizer import (
    SourceDocument,
    IngestionAdapter,
    ingest_documents,
    combine_text,
    wrap_block,
    UnsupportedFileTypeError,
    UploadLimitError,
    ExtractionError,
)
from summarizer.file_ingestion import USER_TEXT_DELIMITER


def _txt(name, text):
    return SourceDocument(name=name, media_type="text/plain", data=text.encode("utf-8"))


def _pdf(name, data=b"%PDF-1.4 fake"):
    return SourceDocument(name=name, media_type="application/pdf", data=data)


class TestWrapBlock:

    def test_plain_block(self):
        assert wrap_block("a.txt", "hello") == (
            "--- START OF a.txt ---\nhello\n--- END OF a.txt ---"
        )

    def test_extracted_block_is_labelled(self):
        block = wrap_block("scan.png", "words", extracted=True)
        assert block.startswith("--- START OF OCR'd scan.png ---\n")
        assert block.endswith("\n--- END OF OCR'd scan.png ---")


class TestIngestDocuments:

    def test_text_files_are_read_locally(self, fake_client):
        blocks = ingest_documents([_txt("a.txt", "alpha"), _txt("b.txt", "beta")], fake_client)

        assert blocks == [
            "--- START OF a.txt ---\nalpha\n--- END OF a.txt ---",
            "--- START OF b.txt ---\nbeta\n--- END OF b.txt ---",
        ]
        assert fake_client.call_count == 0

    def test_pdf_is_extracted_remotely(self, fake_client):
        document = _pdf("contract.pdf")
        blocks = ingest_documents([document], fake_client)

        assert blocks == [wrap_block("contract.pdf", "extracted text", extracted=True)]
        assert len(fake_client.extractions) == 1
        file_part, instruction = fake_client.extractions[0]
        assert file_part["mime_type"] == "application/pdf"
        assert file_part["data"] == base64.b64encode(document.data).decode("ascii")
        assert instruction["type"] == "text"

    def test_input_order_is_preserved(self, fake_client):
        docs = [_txt("1.txt", "one"), _pdf("2.pdf"), _txt("3.txt", "three")]
        blocks = ingest_documents(docs, fake_client)

        assert [b.splitlines()[0] for b in blocks] == [
            "--- START OF 1.txt ---",
            "--- START OF OCR'd 2.pdf ---",
            "--- START OF 3.txt ---",
        ]

    def test_media_type_parameters_are_ignored(self, fake_client):
        doc = SourceDocument(name="a.txt", media_type="text/plain; charset=utf-8", data=b"x")
        assert ingest_documents([doc], fake_client) == [wrap_block("a.txt", "x")]

    def test_utf8_bom_is_stripped(self, fake_client):
        doc = SourceDocument(name="bom.txt", media_type="text/plain", data=b"\xef\xbb\xbfhi")
        assert ingest_documents([doc], fake_client) == [wrap_block("bom.txt", "hi")]

    @pytest.mark.parametrize("position", [0, 1, 2])
    def test_unsupported_type_anywhere_makes_no_remote_call(self, fake_client, position):
        docs = [_pdf("a.pdf"), _pdf("b.pdf")]
        docs.insert(position, SourceDocument(name="sheet.docx", media_type="application/msword"))

        with pytest.raises(UnsupportedFileTypeError) as exc_info:
            ingest_documents(docs, fake_client)

        assert "sheet.docx" in str(exc_info.value)
        assert fake_client.call_count == 0

    def test_unsupported_message_lists_accepted_types(self, fake_client):
        doc = SourceDocument(name="x.zip", media_type="application/zip")
        with pytest.raises(UnsupportedFileTypeError) as exc_info:
            ingest_documents([doc], fake_client)
        assert str(exc_info.value) == (
            'File type for "x.zip" is not supported. Please use .txt, .pdf, .jpg, or .png.'
        )

    def test_extraction_failure_aborts_batch(self, make_client):
        client = make_client(fail_extract=True)
        with pytest.raises(ExtractionError) as exc_info:
            ingest_documents([_txt("a.txt", "fine"), _pdf("broken.pdf")], client)

        assert exc_info.value.filename == "broken.pdf"
        assert 'Failed to process file "broken.pdf"' in exc_info.value.message
        assert isinstance(exc_info.value.original_error, RuntimeError)

    def test_too_many_files(self, fake_client):
        docs = [_txt(f"{i}.txt", "x") for i in range(3)]
        with pytest.raises(UploadLimitError):
            ingest_documents(docs, fake_client, max_files=2)

    def test_file_too_large(self, fake_client):
        doc = _pdf("big.pdf", data=b"0" * (1024 * 1024 + 1))
        with pytest.raises(UploadLimitError) as exc_info:
            ingest_documents([doc], fake_client, max_file_size_mb=1)
        assert "big.pdf" in str(exc_info.value)
        assert fake_client.call_count == 0


class TestCombineText:

    def test_blocks_only(self):
        assert combine_text(["A", "B"], "") == "A\n\nB"

    def test_pasted_only(self):
        assert combine_text([], "pasted") == "pasted"

    def test_blocks_then_pasted_text(self):
        assert combine_text(["A"], "pasted") == f"A\n\n{USER_TEXT_DELIMITER}\n\npasted"

    def test_whitespace_pasted_text_is_ignored(self):
        assert combine_text(["A"], "   \n") == "A"

    def test_nothing(self):
        assert combine_text([], "") == ""


def test_ingestion_adapter_uses_its_limits(fake_client):
    adapter = IngestionAdapter(fake_client, max_files=1)
    with pytest.raises(UploadLimitError):
        adapter.combine([_txt("a.txt", "a"), _txt("b.txt", "b")], "")

    combined = IngestionAdapter(fake_client).combine([_txt("a.txt", "a")], "note")
    assert combined.endswith(f"{USER_TEXT_DELIMITER}\n\nnote")
