import sys
from pathlib import Path

from gql2jsonschema import log


def write_json_schema(json_schema: str, output_path: Path | None = None) -> None:
    """
    Write the generated JSON Schema to a file, or to stdout when no path is given.

    Args:
        json_schema: The serialized JSON Schema
        output_path: Path where the schema should be written
    """
    if output_path is None:
        sys.stdout.write(json_schema + "\n")
        sys.stdout.flush()
        return

    log.info(f"Writing JSON Schema to: {output_path}")

    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(json_schema + "\n", encoding="utf-8")
        log.info(f"Successfully wrote {len(json_schema)} characters to {output_path}")
    except OSError as e:
        log.error(f"Failed to write schema to {output_path}: {e}")
        raise
