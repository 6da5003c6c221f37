# SPDX-License-Identifier: MIT

from typing import TypedDict

from labtrack.model.entity_id import EntityId


class FileAttachment(TypedDict):
    id: EntityId
    name: str
    type: str
    data_url: str
