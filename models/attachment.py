# -*- coding: utf-8 -*-
"""
Attachment entity model.
A binary file picked by the user and submitted alongside a form.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional
import mimetypes
import uuid


@dataclass
class AttachmentFile:
    """
    A single file attached to a form field (image or document).

    Either ``data`` (in-memory bytes) or ``path`` (file on disk) is set;
    ``size`` and ``content_type`` are what the file validators inspect.
    """

    name: str = ""
    content_type: str = ""
    size: int = 0
    data: Optional[bytes] = None
    path: Optional[Path] = None
    attachment_uuid: str = field(default_factory=lambda: str(uuid.uuid4()))

    def __post_init__(self):
        """Fill in size and MIME type when they can be derived."""
        if self.path is not None and not isinstance(self.path, Path):
            self.path = Path(self.path)
        if not self.size:
            if self.data is not None:
                self.size = len(self.data)
            elif self.path is not None and self.path.exists():
                self.size = self.path.stat().st_size
        if not self.content_type and self.name:
            guessed, _ = mimetypes.guess_type(self.name)
            self.content_type = guessed or "application/octet-stream"

    @classmethod
    def from_path(cls, path, content_type: str = "") -> "AttachmentFile":
        """Create an attachment for a file on disk."""
        path = Path(path)
        return cls(name=path.name, content_type=content_type, path=path)

    @property
    def is_image(self) -> bool:
        return self.content_type.startswith("image/")

    @property
    def preview_source(self) -> Optional[str]:
        """Location a preview widget can load, if the file is on disk."""
        return str(self.path) if self.path is not None else None

    def read_bytes(self) -> bytes:
        """Return the file contents."""
        if self.data is not None:
            return self.data
        if self.path is not None:
            return self.path.read_bytes()
        return b""

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization (contents excluded)."""
        return {
            "attachment_uuid": self.attachment_uuid,
            "name": self.name,
            "content_type": self.content_type,
            "size": self.size,
            "path": str(self.path) if self.path else None,
        }
