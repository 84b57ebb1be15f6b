from pathlib import Path
from typing import Dict, Optional, Union
from pydantic import BaseModel
import logging
import os

DTD_CONTENT_TYPE = "application/xml-dtd"
DEFAULT_DTD_PATH = Path(__file__).resolve().parent / "issues.dtd"


class ResourceNotFoundError(Exception):
    """Requested static resource is missing or unreadable"""

    def __init__(self, path: Path, status_code: int = 404):
        super().__init__(f"Resource not found: {path}")
        self.path = path
        self.status_code = status_code


class StaticFile(BaseModel):
    filename: str
    content_type: str
    content_length: int
    content: bytes

    def headers(self) -> Dict[str, str]:
        return {
            "Content-Type": self.content_type,
            "Content-Disposition": f'filename="{self.filename}"',
            "Content-Length": str(self.content_length),
        }


class DtdResource:
    """Serves the DTD describing the XML issue export format"""

    def __init__(self, path: Optional[Union[str, Path]] = None):
        self.path = Path(path) if path else DEFAULT_DTD_PATH

    def exists(self) -> bool:
        return self.path.is_file() and os.access(self.path, os.R_OK)

    def load(self) -> StaticFile:
        if not self.exists():
            logging.warning(f"DTD file not readable: {self.path}")
            raise ResourceNotFoundError(self.path)

        try:
            content = self.path.read_bytes()
        except OSError as e:
            logging.error(f"Failed to read DTD file {self.path}: {e}")
            raise ResourceNotFoundError(self.path) from e

        return StaticFile(
            filename=self.path.name,
            content_type=DTD_CONTENT_TYPE,
            content_length=len(content),
            content=content
        )
