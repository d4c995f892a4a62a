import json
import logging
from pathlib import Path
from typing import Any, Dict, List

logger = logging.getLogger(__name__)


def load_station_records(path: Path | str) -> List[Dict[str, Any]]:
    """
    Load the voting-station records from a JSON document.

    The document must be a list of objects. Parse failures propagate as
    ``json.JSONDecodeError``.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the document is not a list of objects
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Station file not found: {path}")

    logger.info(f"Loading voting stations from {path}")
    with path.open(encoding='utf-8') as f:
        data = json.load(f)

    if not isinstance(data, list):
        raise ValueError(
            f"Expected a list of station records in {path}, got {type(data).__name__}"
        )
    for index, record in enumerate(data):
        if not isinstance(record, dict):
            raise ValueError(
                f"Station record {index} in {path} is not an object: {record!r}"
            )

    return data
