# SPDX-License-Identifier: MIT

import base64
import mimetypes
from pathlib import Path, PureWindowsPath

from labtrack.model.entity_id import generate_entity_id
from labtrack.model.file_attachment import FileAttachment

DEFAULT_MIME_TYPE = "application/octet-stream"


def attachment_from_path(path: Path) -> FileAttachment:
    """Read a file into an attachment carrying a base64 data URL."""
    payload = path.read_bytes()
    mime_type = mimetypes.guess_type(path.name)[0] or DEFAULT_MIME_TYPE
    encoded = base64.b64encode(payload).decode("ascii")
    return {
        "id": generate_entity_id(),
        "name": path.name,
        "type": mime_type,
        "data_url": f"data:{mime_type};base64,{encoded}",
    }


def attachment_file_name(attachment: FileAttachment) -> str:
    """
    Last path component of the stored name, safe to join onto an export
    directory. Both slash styles count as separators.

    Raises:
        ValueError: if nothing usable is left of the name
    """
    name = PureWindowsPath(attachment["name"]).name
    if name in ("", ".", ".."):
        raise ValueError(f"attachment name {attachment['name']!r} is not a file name")
    return name


def attachment_payload(attachment: FileAttachment) -> bytes:
    header, _, encoded = attachment["data_url"].partition(",")
    if not header.startswith("data:") or not header.endswith(";base64"):
        raise ValueError(f"attachment {attachment['name']} is not a base64 data URL")
    return base64.b64decode(encoded)
