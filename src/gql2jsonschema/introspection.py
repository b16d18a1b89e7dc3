"""Loading of GraphQL introspection results.

Results can come from:
- a live GraphQL endpoint, queried with the standard introspection query
- a JSON file or standard input, holding either the bare `data` payload
  (`{"__schema": ...}`) or a full GraphQL response (`{"data": ..., "errors": ...}`)
"""

import json
import urllib.error
import urllib.request
from collections.abc import Iterable
from pathlib import Path
from typing import Any, TextIO

from graphql import get_introspection_query

from gql2jsonschema import log

DEFAULT_TIMEOUT = 30


class IntrospectionError(Exception):
    """Raised when an introspection result cannot be obtained or understood."""


def parse_headers(headers: Iterable[str]) -> dict[str, str]:
    """
    Parse `Key: Value` header strings.

    Entries without a colon are skipped.

    Args:
        headers: Header strings

    Returns:
        dict[str, str]: Header names mapped to values, later entries winning
    """
    parsed: dict[str, str] = {}
    for header in headers:
        key, separator, value = header.partition(":")
        if not separator:
            log.warning(f"Ignoring malformed header (expected 'Key: Value'): {header}")
            continue
        parsed[key.strip()] = value.strip()
    return parsed


def unwrap_response(response: Any) -> dict[str, Any]:
    """
    Return the `data` payload of a GraphQL response.

    Args:
        response: A decoded GraphQL response

    Returns:
        dict[str, Any]: The `data` payload

    Raises:
        IntrospectionError: If the response carries errors or no data
    """
    if not isinstance(response, dict):
        raise IntrospectionError("GraphQL response is not a JSON object")

    errors = response.get("errors")
    if errors:
        first = errors[0]
        message = first.get("message", first) if isinstance(first, dict) else first
        raise IntrospectionError(f"GraphQL error: {message}")

    data = response.get("data")
    if not isinstance(data, dict):
        raise IntrospectionError("no data in response")
    return data


def load_introspection(text: str | bytes) -> dict[str, Any]:
    """
    Parse an introspection result, unwrapping a GraphQL response envelope if present.

    Args:
        text: JSON text

    Returns:
        dict[str, Any]: The introspection payload holding `__schema`

    Raises:
        IntrospectionError: If the text is not valid JSON or the envelope reports errors
    """
    try:
        document = json.loads(text)
    except ValueError as e:
        raise IntrospectionError(f"error parsing introspection result: {e}") from e

    if isinstance(document, dict) and "__schema" not in document and ("data" in document or "errors" in document):
        return unwrap_response(document)

    if not isinstance(document, dict):
        raise IntrospectionError("introspection result is not a JSON object")
    return document


def read_introspection_file(path: Path) -> dict[str, Any]:
    """Read an introspection result from a JSON file."""
    log.info(f"Reading introspection result from: {path}")
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise IntrospectionError(f"error reading input file: {e}") from e
    return load_introspection(text)


def read_introspection_stdin(stream: TextIO) -> dict[str, Any] | None:
    """
    Read an introspection result piped to standard input.

    Returns:
        dict[str, Any] | None: The payload, or None if the stream is an interactive terminal
    """
    if stream.isatty():
        return None

    text = stream.read()
    if not text.strip():
        return None
    return load_introspection(text)


def fetch_introspection(
    endpoint: str,
    headers: Iterable[str] = (),
    timeout: float = DEFAULT_TIMEOUT,
) -> dict[str, Any]:
    """
    Run the introspection query against a GraphQL endpoint.

    Args:
        endpoint: GraphQL endpoint URL
        headers: Extra HTTP headers as `Key: Value` strings
        timeout: Request timeout in seconds

    Returns:
        dict[str, Any]: The `data` payload of the response

    Raises:
        IntrospectionError: On transport failures, invalid responses or GraphQL errors
    """
    log.info(f"Fetching schema from endpoint: {endpoint}")

    payload = json.dumps({"query": get_introspection_query(descriptions=True)}).encode("utf-8")
    request_headers = {"Content-Type": "application/json", **parse_headers(headers)}
    request = urllib.request.Request(endpoint, data=payload, headers=request_headers, method="POST")

    try:
        with urllib.request.urlopen(request, timeout=timeout) as resp:  # nosec - user supplied endpoint
            body = resp.read()
    except urllib.error.HTTPError as e:
        # GraphQL servers may report query errors with a non-2xx status
        body = e.read()
        if not body:
            raise IntrospectionError(f"error making request: {e}") from e
    except (urllib.error.URLError, OSError) as e:
        raise IntrospectionError(f"error making request: {e}") from e

    try:
        response = json.loads(body)
    except ValueError as e:
        raise IntrospectionError(f"error parsing response: {e}") from e

    return unwrap_response(response)
