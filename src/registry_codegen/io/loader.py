"""Registry document I/O."""

import logging
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from registry_codegen.errors import InputNotFound, MalformedInput
from registry_codegen.models import RegistryRecord

logger = logging.getLogger(__name__)

_RECORDS_ADAPTER = TypeAdapter(list[RegistryRecord])


def load_registry_records(path: Path) -> list[RegistryRecord]:
    """Load a registry document as an ordered list of records.

    Args:
        path: JSON file whose top-level value is an array of {name, id} objects

    Returns:
        Records in document order

    Raises:
        InputNotFound: If path is not a readable file
        MalformedInput: If the document is not UTF-8 JSON of the expected shape
    """
    if not path.is_file():
        raise InputNotFound(path)

    try:
        json_str = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise MalformedInput(path, f"not valid UTF-8 ({e.reason})") from e
    except OSError as e:
        logger.debug("Failed to read %s: %s", path, e)
        raise InputNotFound(path) from e

    try:
        records = _RECORDS_ADAPTER.validate_json(json_str)
    except ValidationError as e:
        raise MalformedInput(path, _summarize_validation_error(e)) from e

    logger.debug("Loaded %d records from %s", len(records), path)
    return records


def _summarize_validation_error(error: ValidationError) -> str:
    """Condense a pydantic error into one line naming the first failing location."""
    first = error.errors()[0]
    location = ".".join(str(part) for part in first["loc"])
    if location:
        return f"{first['msg']} at [{location}] ({error.error_count()} error(s))"
    return f"{first['msg']} ({error.error_count()} error(s))"
