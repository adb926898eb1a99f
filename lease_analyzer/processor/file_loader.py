import mimetypes
from pathlib import Path

from lease_analyzer.processor.exceptions import FileReadError
from lease_analyzer.processor.models import UploadedFile

DEFAULT_MIME_TYPE = "application/octet-stream"


def guess_mime_type(path: Path) -> str:
    mime_type, _ = mimetypes.guess_type(path.name)
    return mime_type or DEFAULT_MIME_TYPE


class FileLoader:
    """Reads local files into UploadedFile records."""

    def load(self, path: Path) -> UploadedFile:
        """Read a file from disk, declaring its MIME type from the extension.

        Raises:
            FileNotFoundError: if the file does not exist.
            FileReadError: if the file exists but cannot be read.
        """
        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")
        try:
            content = path.read_bytes()
        except OSError as exc:
            raise FileReadError(f"Failed to read {path}: {exc}") from exc
        return UploadedFile(
            name=path.name,
            size=len(content),
            mime_type=guess_mime_type(path),
            content=content,
        )
