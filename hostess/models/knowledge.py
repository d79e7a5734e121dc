"""
Restaurant knowledge record and its loader.

The knowledge record is a free-form JSON document describing the business
(name, hours, location, menu, policies, ...). It is read once at startup and
never rewritten. A missing or unreadable document degrades to a record that
only carries the default display name, so the webhook can still answer calls.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Tuple, Union

from pydantic import BaseModel, ConfigDict, PrivateAttr, field_validator

from hostess.config.constants import DEFAULT_BUSINESS_NAME, LOGGER_NAME

logger = logging.getLogger(LOGGER_NAME)


class KnowledgeRecord(BaseModel):
    """Immutable business description; any keys besides ``name`` are kept as-is."""

    model_config = ConfigDict(extra="allow", frozen=True)

    name: str = DEFAULT_BUSINESS_NAME

    _key_order: Tuple[str, ...] = PrivateAttr(default=())

    def __init__(self, /, **data: Any):
        super().__init__(**data)
        self._key_order = tuple(data)

    @field_validator("name", mode="before")
    @classmethod
    def default_blank_name(cls, v):
        """Substitute the default display name for a null or blank name."""
        if v is None or (isinstance(v, str) and not v.strip()):
            return DEFAULT_BUSINESS_NAME
        return v

    def as_document(self) -> Dict[str, Any]:
        """
        Return the record as a plain dictionary in the order the keys were given.

        A name supplied by default (absent from the source) comes first.
        """
        values = self.model_dump()
        order = list(self._key_order)
        if "name" not in order:
            order.insert(0, "name")
        order.extend(key for key in values if key not in order)
        return {key: values[key] for key in order if key in values}


def load_knowledge(path: Union[str, Path]) -> KnowledgeRecord:
    """
    Load the knowledge record from a JSON file.

    Args:
        path: Location of the JSON document

    Returns:
        KnowledgeRecord: The parsed record, or the default record when the file
        is missing, unreadable, not valid JSON, or not a JSON object
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = json.load(f)
        if not isinstance(raw, dict):
            raise ValueError(f"expected a JSON object, got {type(raw).__name__}")
        record = KnowledgeRecord(**raw)
    except (OSError, ValueError) as e:
        # ValueError covers JSONDecodeError, UnicodeDecodeError and ValidationError
        logger.error(f"Failed to load knowledge file {path}: {e}")
        return KnowledgeRecord()

    logger.info(f"Loaded restaurant info: {record.name}")
    return record
