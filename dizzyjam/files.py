"""Validated handles to local files destined for multipart upload."""

import os
from dataclasses import dataclass

from dizzyjam.errors import InvalidFileError


@dataclass(frozen=True)
class FileRef:
    """A local file to upload as a request field.

    The file is validated when the reference is created; its contents are
    only read when the request is sent.

    Raises:
        InvalidFileError: If the path is empty, does not exist, is not a
            regular file, or is not readable.
    """

    path: str

    def __post_init__(self):
        if not self.path:
            raise InvalidFileError("Missing filename", 400)
        details = {"path": self.path}
        if not os.path.exists(self.path):
            raise InvalidFileError("File does not exist", 400, details)
        if not os.path.isfile(self.path):
            raise InvalidFileError("Not a file", 400, details)
        if not os.access(self.path, os.R_OK):
            raise InvalidFileError("File is not readable", 400, details)

    @property
    def name(self) -> str:
        return os.path.basename(self.path)
