"""CSV upload handling.

The core treats the CSV as an opaque string; this module only gets the text
off disk.
"""

import logging
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from .errors import UploadError

logger = logging.getLogger(__name__)

CSV_EXTENSIONS = {".csv"}
ENCODINGS = ("utf-8", "utf-8-sig", "latin-1")


class CsvDocument(BaseModel):
    """A loaded CSV file."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="File name shown to the user")
    text: str = Field(description="Full file contents")

    @property
    def size(self) -> int:
        return len(self.text)

    @property
    def row_count(self) -> int:
        """Number of non-empty lines, header included."""
        return sum(1 for line in self.text.splitlines() if line.strip())


def decode_csv_bytes(raw: bytes) -> str:
    """Decode file bytes, trying UTF-8, UTF-8 with BOM and Latin-1 in turn."""
    if raw.startswith(b"\xef\xbb\xbf"):
        return raw.decode("utf-8-sig")
    for encoding in ENCODINGS:
        try:
            return raw.decode(encoding)
        except UnicodeDecodeError:
            continue
    raise UploadError("Could not decode file as text")


def load_csv(path: str | Path) -> CsvDocument:
    """Load a ``.csv`` file from disk.

    Args:
        path: Path to the file

    Returns:
        CsvDocument with the file name and text

    Raises:
        UploadError: If the file is missing, not a CSV, or unreadable
    """
    file_path = Path(path).expanduser()
    if file_path.suffix.lower() not in CSV_EXTENSIONS:
        raise UploadError(f"Not a CSV file: {file_path.name}")
    if not file_path.is_file():
        raise UploadError(f"File not found: {file_path}")

    try:
        raw = file_path.read_bytes()
    except OSError as e:
        raise UploadError(f"Failed to read {file_path.name}: {e}") from e

    document = CsvDocument(name=file_path.name, text=decode_csv_bytes(raw))
    logger.info("Loaded %s (%d characters)", document.name, document.size)
    return document
