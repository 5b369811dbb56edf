"""JSONL helpers for replay scripts and snapshot output."""

import json
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import Any

from pydantic import BaseModel

from formact.core.errors import ScenarioError


def read_jsonl(path: Path | str) -> Iterator[dict[str, Any]]:
    """Yield the JSON object on each non-blank line of a JSONL file.

    Raises:
        ScenarioError: If a line is not valid JSON or is not an object.
    """
    with open(path) as f:
        for line_num, line in enumerate(f, 1):
            line = line.strip()
            if not line:
                continue
            try:
                record = json.loads(line)
            except json.JSONDecodeError as e:
                raise ScenarioError(f"{path}:{line_num}: invalid JSON: {e}") from e
            if not isinstance(record, dict):
                raise ScenarioError(
                    f"{path}:{line_num}: expected an object, got {type(record).__name__}"
                )
            yield record


def write_jsonl(path: Path | str, records: Iterable[BaseModel | dict[str, Any]]) -> int:
    """Write records to a JSONL file, one JSON document per line.

    Returns:
        Number of records written.
    """
    count = 0
    with open(path, "w") as f:
        for record in records:
            if isinstance(record, BaseModel):
                f.write(record.model_dump_json() + "\n")
            else:
                f.write(json.dumps(record, ensure_ascii=False, default=str) + "\n")
            count += 1
    return count
