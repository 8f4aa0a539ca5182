"""Unit tests for CSV upload handling."""
import pytest

from csvchat.errors import UploadError
from csvchat.upload import CsvDocument, decode_csv_bytes, load_csv


class TestLoadCsv:
    """Tests for load_csv."""

    def test_load_csv(self, tmp_path, sample_csv_text):
        """Test loading a CSV file from disk."""
        path = tmp_path / "sales.csv"
        path.write_text(sample_csv_text, encoding="utf-8")

        document = load_csv(path)

        assert document.name == "sales.csv"
        assert document.text == sample_csv_text
        assert document.row_count == 5
        assert document.size == len(sample_csv_text)

    def test_uppercase_extension(self, tmp_path):
        """Test that the extension check ignores case."""
        path = tmp_path / "DATA.CSV"
        path.write_text("a\n1\n")

        assert load_csv(str(path)).name == "DATA.CSV"

    def test_wrong_extension(self, tmp_path):
        """Test that non-CSV files are rejected."""
        path = tmp_path / "notes.txt"
        path.write_text("a,b\n")

        with pytest.raises(UploadError, match="Not a CSV file"):
            load_csv(path)

    def test_missing_file(self, tmp_path):
        """Test that a missing file is reported."""
        with pytest.raises(UploadError, match="File not found"):
            load_csv(tmp_path / "missing.csv")

    def test_directory_named_csv(self, tmp_path):
        """Test that a directory is not accepted as a file."""
        (tmp_path / "dir.csv").mkdir()

        with pytest.raises(UploadError):
            load_csv(tmp_path / "dir.csv")


class TestDecodeCsvBytes:
    """Tests for decode_csv_bytes."""

    def test_utf8(self):
        """Test plain UTF-8."""
        assert decode_csv_bytes("città,€\n".encode()) == "città,€\n"

    def test_bom_is_stripped(self):
        """Test that a UTF-8 byte order mark is removed."""
        assert decode_csv_bytes(b"\xef\xbb\xbfa,b\n") == "a,b\n"

    def test_latin1_fallback(self):
        """Test that invalid UTF-8 falls back to Latin-1."""
        assert decode_csv_bytes("café\n".encode("latin-1")) == "café\n"


class TestCsvDocument:
    """Tests for the CsvDocument model."""

    def test_row_count_skips_blank_lines(self):
        """Test that blank lines are not rows."""
        document = CsvDocument(name="x.csv", text="a,b\n\n1,2\n   \n3,4")
        assert document.row_count == 3

    def test_empty_document(self):
        """Test an empty file."""
        document = CsvDocument(name="x.csv", text="")
        assert document.row_count == 0
        assert document.size == 0
