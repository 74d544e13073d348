"""Tests for the ingest module."""

import gzip
import io
import logging
import tempfile
from pathlib import Path

import pytest

from cedict.errors import BadFormatError, ReadError
from cedict.ingest import CEDictIngestor, IngestResult, ingest


class TestIngestResult:
    """Tests for IngestResult dataclass."""

    def test_repr(self):
        """Test IngestResult string representation."""
        result = IngestResult(
            entries=[],
            source_path="/cedict_ts.u8",
            dict_name="cedict_ts",
            total_lines=100,
            total_comments=30,
            total_valid=68,
            errors=["a", "b"],
        )
        repr_str = repr(result)
        assert "cedict_ts" in repr_str
        assert "68 entries" in repr_str
        assert "2 errors" in repr_str


class TestCEDictIngestor:
    """Tests for CEDictIngestor."""

    def test_get_dict_name(self):
        """Test dictionary name generation."""
        ingestor = CEDictIngestor()
        assert ingestor.get_dict_name(Path("/path/to/cedict_ts.u8")) == "cedict_ts"
        assert ingestor.get_dict_name(
            Path("/path/to/cedict_1_0_ts_utf-8_mdbg.txt.gz")
        ) == "cedict_1_0_ts_utf-8_mdbg"

    def test_ingest_file(self, sample_cedict_content):
        """Test ingesting a plain dictionary file."""
        with tempfile.NamedTemporaryFile(
            mode="w", suffix=".u8", delete=False, encoding="utf-8"
        ) as f:
            f.write(sample_cedict_content)
            filepath = Path(f.name)

        try:
            result = CEDictIngestor().ingest(filepath)

            assert result.total_valid == 5
            assert result.total_comments == 5
            assert result.total_lines == 10
            assert result.errors == []
            assert result.dict_name == filepath.stem
            assert result.source_path == str(filepath.resolve())
            assert [e.traditional for e in result.entries][:2] == ["一團火", "一團"]
        finally:
            filepath.unlink()

    def test_ingest_gzip(self, sample_cedict_content, tmp_path):
        """Test .gz files are decompressed."""
        filepath = tmp_path / "cedict_1_0_ts_utf-8_mdbg.txt.gz"
        with gzip.open(filepath, "wt", encoding="utf-8") as f:
            f.write(sample_cedict_content)

        result = ingest(filepath)
        assert result.dict_name == "cedict_1_0_ts_utf-8_mdbg"
        assert result.total_valid == 5
        assert result.entries[3].pinyin_tone_marks == "yīlǎnzi"

    def test_metadata(self, sample_cedict_content):
        """Test #! header lines become metadata."""
        result = CEDictIngestor().ingest_stream(
            io.BytesIO(sample_cedict_content.encode("utf-8"))
        )
        assert result.metadata == {
            "version": "1",
            "subversion": "0",
            "date": "2024-05-01T04:33:55Z",
        }

    def test_skips_bad_lines(self, sample_bad_line_content, caplog):
        """Test malformed lines are recorded and skipped."""
        with caplog.at_level(logging.WARNING, logger="cedict.ingest"):
            result = CEDictIngestor().ingest_stream(
                io.BytesIO(sample_bad_line_content.encode("utf-8")),
                dict_name="broken",
            )

        assert [e.simplified for e in result.entries] == ["一层", "一团"]
        assert len(result.errors) == 1
        assert "line 3" in result.errors[0]
        assert "skipping" in caplog.text

    def test_strict_raises(self, sample_bad_line_content):
        """Test strict mode raises on the first malformed line."""
        ingestor = CEDictIngestor(skip_bad_lines=False)
        with pytest.raises(BadFormatError) as exc_info:
            ingestor.ingest_stream(io.BytesIO(sample_bad_line_content.encode("utf-8")))
        assert exc_info.value.line_number == 3

    def test_read_error_propagates(self):
        """Test read failures are not skipped."""
        with pytest.raises(ReadError):
            CEDictIngestor().ingest_stream(io.BytesIO(b"# ok\n\xff\n"))

    def test_other_encoding(self):
        """Test a non-UTF-8 source with an explicit encoding."""
        content = "一層 一层 [yi1 ceng2] /layer/\n".encode("gb18030")
        result = CEDictIngestor(encoding="gb18030").ingest_stream(io.BytesIO(content))
        assert result.entries[0].simplified == "一层"
