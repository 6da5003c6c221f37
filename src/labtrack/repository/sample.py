# SPDX-License-Identifier: MIT

import datetime
import logging
from copy import deepcopy
from typing import Any, Optional, cast

from yaml import YAMLError, dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from labtrack import configuration, time
from labtrack.model.entity_id import EntityId, generate_entity_id
from labtrack.model.file_attachment import FileAttachment
from labtrack.model.material_type import MATERIAL_TYPES
from labtrack.model.sample import MIX_TYPES, MODIFIABLE_FIELDS, Sample

# Calendar-date fields kept as 'YYYY-MM-DD' strings on disk and in memory
DATE_STRING_FIELDS: tuple[str, ...] = (
    "pouring_date",
    "crush_date_7_days",
    "crush_date_28_days",
)

log = logging.getLogger("repository.sample")


class SampleRepository:
    def __init__(self) -> None:
        self._samples: Optional[list[Sample]] = None
        self.is_dirty = False
        self._dirty_ids: set[str] = set()
        self._deleted_ids: set[str] = set()

    @property
    def samples(self) -> list[Sample]:
        if self._samples is None:
            self.__load_data()
        if self._samples is None:
            raise ValueError()
        return self._samples

    def __load_data(self) -> None:
        self._samples = []
        if not configuration.DATA_SAMPLES_DIR.is_dir():
            return
        for file_path in sorted(configuration.DATA_SAMPLES_DIR.iterdir()):
            if file_path.suffix != ".yaml" or file_path.name == ".gitkeep":
                continue
            try:
                raw_sample = load(file_path.read_text(), Loader=Loader)
                if raw_sample is None:
                    continue
                sample = self.__convert_sample_for_deserialization(raw_sample)
            except (YAMLError, ValueError, KeyError, TypeError) as e:
                log.warning("Skipping unreadable sample file %s: %s", file_path, e)
                continue
            self._samples.append(sample)
        log.debug(
            "Loaded %d samples from %s",
            len(self._samples),
            configuration.DATA_SAMPLES_DIR,
        )

    def __save_data(self) -> None:
        configuration.DATA_SAMPLES_DIR.mkdir(parents=True, exist_ok=True)

        # Write dirty entities
        for sample in self.samples:
            if sample["id"] in self._dirty_ids:
                serializable_sample = self.__convert_sample_for_serialization(
                    deepcopy(sample)
                )
                file_path = configuration.DATA_SAMPLES_DIR / f"{sample['id']}.yaml"
                file_path.write_text(
                    dump(serializable_sample, Dumper=Dumper, allow_unicode=True)
                )
                log.debug("Wrote sample %s", sample["id"])

        # Remove hard-deleted entity files
        for entity_id in self._deleted_ids:
            file_path = configuration.DATA_SAMPLES_DIR / f"{entity_id}.yaml"
            if file_path.exists():
                file_path.unlink()
                log.info("Deleted sample file %s", file_path)

        # Clear tracking sets
        self._dirty_ids.clear()
        self._deleted_ids.clear()

    def flush(self) -> bool:
        if self._samples is not None and self.is_dirty:
            self.__save_data()
            self.is_dirty = False
            return True
        return False

    def __convert_sample_for_serialization(self, sample: Sample) -> dict[str, Any]:
        serializable_sample = cast(dict[str, Any], sample)
        serializable_sample["created"] = time.datetime_to_iso_str(
            serializable_sample["created"]
        )
        serializable_sample["updated"] = time.datetime_to_iso_str(
            serializable_sample["updated"]
        )
        return serializable_sample

    def __convert_sample_for_deserialization(self, sample: Any) -> Sample:
        if not isinstance(sample, dict):
            raise TypeError(f"expected a mapping, got {type(sample).__name__}")
        if sample.get("material_type") not in MATERIAL_TYPES:
            raise ValueError(f"unknown material type {sample.get('material_type')!r}")
        if not isinstance(sample.get("id"), str):
            raise KeyError("id")
        deserializable_sample = sample
        deserializable_sample["created"] = time.datetime_from_str(
            str(deserializable_sample["created"])
        )
        deserializable_sample["updated"] = time.datetime_from_str(
            str(deserializable_sample.get("updated", deserializable_sample["created"]))
        )
        if deserializable_sample.get("files") is None:
            deserializable_sample["files"] = []
        # Hand-edited files may hold bare YAML dates
        for field in DATE_STRING_FIELDS:
            value = deserializable_sample.get(field)
            if isinstance(value, datetime.date):
                deserializable_sample[field] = time.date_to_str(value)
        return cast(Sample, deserializable_sample)

    def __find(self, id: EntityId) -> Sample:
        for sample in self.samples:
            if sample["id"] == id:
                return sample
        raise ValueError(f"no sample with id {id}")

    def save_new_sample(self, sample: Sample) -> EntityId:
        self.is_dirty = True

        sample["id"] = generate_entity_id()

        self.samples.append(sample)
        self._dirty_ids.add(sample["id"])
        log.info("Created %s sample %s", sample["material_type"], sample["id"])

        return sample["id"]

    def modify_sample(
        self,
        id: EntityId,
        contractor_name: Optional[str] = None,
        technician_name: Optional[str] = None,
        fields: Optional[dict[str, str]] = None,
        add_files: Optional[list[FileAttachment]] = None,
        remove_file_ids: Optional[list[EntityId]] = None,
    ) -> None:
        sample = self.__find(id)

        allowed_fields = MODIFIABLE_FIELDS[sample["material_type"]]
        if fields is not None:
            for field in fields:
                if field not in allowed_fields:
                    raise ValueError(
                        f"{field} cannot be modified on a {sample['material_type']} sample"
                    )
                if field == "mix_type" and fields[field] not in MIX_TYPES:
                    raise ValueError(
                        f"mix type must be one of {', '.join(MIX_TYPES)}, got {fields[field]!r}"
                    )

        self.is_dirty = True
        self._dirty_ids.add(id)

        # Set updated timestamp to current moment
        sample["updated"] = time.now_utc()
        if contractor_name is not None:
            sample["contractor_name"] = contractor_name
        if technician_name is not None:
            sample["technician_name"] = technician_name
        if fields is not None:
            for field, value in fields.items():
                sample[field] = value  # type: ignore[literal-required]
        if remove_file_ids is not None:
            sample["files"] = [
                file for file in sample["files"] if file["id"] not in remove_file_ids
            ]
        if add_files is not None:
            sample["files"].extend(add_files)

    def delete_sample(self, id: EntityId) -> None:
        sample = self.__find(id)

        self.is_dirty = True
        self.samples.remove(sample)
        self._dirty_ids.discard(id)
        self._deleted_ids.add(id)

    def get_all_samples(self) -> list[Sample]:
        return sorted(
            deepcopy(self.samples), key=lambda sample: sample["created"], reverse=True
        )

    def get_sample(self, id: EntityId) -> Sample:
        return deepcopy(self.__find(id))

    def find_sample_id(self, prefix: str) -> EntityId:
        """
        Resolve a full sample id from a unique prefix of it.

        Raises:
            ValueError: if no sample or more than one sample matches
        """
        matches = [
            cast(EntityId, sample["id"])
            for sample in self.samples
            if sample["id"] is not None and sample["id"].startswith(prefix)
        ]
        if len(matches) == 0:
            raise ValueError(f"no sample id starts with {prefix!r}")
        if len(matches) > 1:
            raise ValueError(f"sample id prefix {prefix!r} is ambiguous")
        return matches[0]


SAMPLE_REPO = SampleRepository()
