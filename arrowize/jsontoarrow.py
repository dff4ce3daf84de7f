"""Infers an Arrow schema from a JSON document and writes it out.

This module provides:
- j2a: Infer an Arrow schema from a JSON document, written as text or as a
  serialized Arrow IPC schema message
- j2pq: Infer an Arrow schema from a JSON document and write an empty
  Parquet file with that schema
"""

import json
import logging
import os
from typing import Any, Dict

import pyarrow as pa
import pyarrow.parquet as pq

from arrowize.maptoarrow import map_to_arrow

logger = logging.getLogger(__name__)

OUTPUT_FORMATS = ('text', 'ipc', 'parquet')


def load_json_document(input_file: str) -> Dict[str, Any]:
    """Loads a JSON document whose root is an object.

    Args:
        input_file: Path of the JSON file

    Returns:
        The decoded document
    """
    with open(input_file, 'r', encoding='utf-8') as f:
        content = f.read().strip()

    if not content:
        raise ValueError(f"No JSON data found in {input_file}")

    document = json.loads(content)
    if not isinstance(document, dict):
        raise ValueError(f"Expected a JSON object at the root of {input_file}, got {type(document).__name__}")
    return document


def convert_json_to_arrow(
    input_file: str,
    output_file: str,
    output_format: str = 'text',
    sort_keys: bool = False,
    strict: bool = False
) -> pa.Schema:
    """Infers an Arrow schema from a JSON document.

    Fields whose type can't be determined from the document (null values,
    empty arrays) are typed as binary and logged as warnings.

    Args:
        input_file: Path of the JSON document to analyze
        output_file: Output path for the schema
        output_format: 'text', 'ipc' or 'parquet'
        sort_keys: Emit object keys in lexicographic order
        strict: Raise the aggregated SchemaInferenceError instead of writing
            a schema with undefined field types

    Returns:
        The inferred schema
    """
    if output_format not in OUTPUT_FORMATS:
        raise ValueError(f"Unsupported output format '{output_format}', expected one of {', '.join(OUTPUT_FORMATS)}")

    document = load_json_document(input_file)
    schema, error = map_to_arrow(document, sort_keys=sort_keys)

    if error is not None:
        if strict:
            raise error
        for path in error.paths:
            logger.warning("Could not determine type of field %s in %s, using binary", '/'.join(path), input_file)

    # Ensure output directory exists
    output_dir = os.path.dirname(output_file)
    if output_dir and not os.path.exists(output_dir):
        os.makedirs(output_dir)

    write_schema(schema, output_file, output_format)
    return schema


def convert_json_to_parquet(input_file: str, parquet_file: str, sort_keys: bool = False, strict: bool = False) -> pa.Schema:
    """Infers an Arrow schema from a JSON document and writes an empty Parquet file with it."""
    return convert_json_to_arrow(input_file, parquet_file, output_format='parquet', sort_keys=sort_keys, strict=strict)


def write_schema(schema: pa.Schema, output_file: str, output_format: str = 'text') -> None:
    """Writes a schema in the given output format."""
    if output_format == 'parquet':
        table = pa.Table.from_batches([], schema=schema)
        pq.write_table(table, output_file)
    elif output_format == 'ipc':
        with open(output_file, 'wb') as f:
            f.write(schema.serialize().to_pybytes())
    else:
        with open(output_file, 'w', encoding='utf-8') as f:
            f.write(schema.to_string())
            f.write('\n')
