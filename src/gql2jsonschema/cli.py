import logging
import sys
from pathlib import Path
from typing import Any

import rich_click as click
from pydantic import ValidationError
from rich.traceback import install

from gql2jsonschema import __version__, log
from gql2jsonschema.config import ENV_PREFIX, ConfigError, resolve_config
from gql2jsonschema.converter import Options, translate_to_jsonschema
from gql2jsonschema.converter.models import IDTypeMapping
from gql2jsonschema.converter.schema_writer import write_json_schema
from gql2jsonschema.introspection import (
    DEFAULT_TIMEOUT,
    IntrospectionError,
    fetch_introspection,
    read_introspection_file,
    read_introspection_stdin,
)

NO_INPUT_MESSAGE = "no input provided: use --endpoint, --input, or pipe data to stdin"


def apply_config_file(ctx: click.Context, param: click.Parameter, value: Path | None) -> Path | None:
    """Load the YAML config file into the context's default map before other options are parsed."""
    try:
        config = resolve_config(value)
    except ConfigError as e:
        raise click.BadParameter(str(e), ctx=ctx, param=param) from e

    if config is not None:
        ctx.default_map = {**(ctx.default_map or {}), **config.to_default_map()}
    return value


def configure_logging(log_level: str, log_file: Path | None) -> None:
    if log_file:
        file_handler = logging.FileHandler(log_file, mode="w")
        file_handler.setFormatter(logging.Formatter("%(asctime)s:%(levelname)s:%(message)s"))
        log.addHandler(file_handler)

    log.setLevel(log_level.upper())
    if log_level.upper() == "DEBUG":
        _ = install(show_locals=True)


def load_input(endpoint: str | None, input_path: Path | None, headers: tuple[str, ...], timeout: int) -> dict[str, Any]:
    """Obtain the introspection result from the endpoint, the input file or stdin, in that order."""
    if endpoint:
        return fetch_introspection(endpoint, headers, timeout)
    if input_path:
        return read_introspection_file(input_path)

    introspection = read_introspection_stdin(sys.stdin)
    if introspection is None:
        raise IntrospectionError(NO_INPUT_MESSAGE)
    return introspection


@click.command(context_settings={"auto_envvar_prefix": ENV_PREFIX})
@click.option(
    "--config",
    type=click.Path(dir_okay=False, path_type=Path),
    callback=apply_config_file,
    is_eager=True,
    expose_value=False,
    help="Config file (default is $HOME/.gql2jsonschema.yaml)",
)
@click.option(
    "--input",
    "-i",
    "input_path",
    envvar=f"{ENV_PREFIX}_INPUT",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Input file containing a GraphQL introspection query result",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, writable=True, path_type=Path),
    help="Output file for the JSON Schema (default is stdout)",
)
@click.option(
    "--endpoint",
    "-e",
    type=str,
    help="GraphQL endpoint URL",
)
@click.option(
    "--header",
    "-H",
    "headers",
    envvar=f"{ENV_PREFIX}_HEADERS",
    multiple=True,
    help="HTTP header for the endpoint (format: 'Key: Value'). Can be specified multiple times.",
)
@click.option(
    "--timeout",
    "-t",
    type=click.IntRange(min=1),
    default=DEFAULT_TIMEOUT,
    help="Timeout in seconds for HTTP requests",
    show_default=True,
)
@click.option(
    "--ignore-internals/--no-ignore-internals",
    default=True,
    help="Ignore GraphQL internal (__-prefixed) types",
    show_default=True,
)
@click.option(
    "--nullable-array-items",
    is_flag=True,
    default=False,
    help="Represent nullable list items as anyOf [item, null]",
)
@click.option(
    "--id-type",
    type=click.Choice([mapping.value for mapping in IDTypeMapping]),
    default=IDTypeMapping.STRING.value,
    help="How to represent the ID type",
    show_default=True,
)
@click.option(
    "-l",
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    default="WARNING",
    help="Log level",
    show_default=True,
)
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, writable=True, path_type=Path),
    help="Log file",
)
@click.version_option(__version__)
def cli(
    input_path: Path | None,
    output: Path | None,
    endpoint: str | None,
    headers: tuple[str, ...],
    timeout: int,
    ignore_internals: bool,
    nullable_array_items: bool,
    id_type: str,
    log_level: str,
    log_file: Path | None,
) -> None:
    """Convert a GraphQL schema to JSON Schema.

    The introspection result is read from a GraphQL endpoint (--endpoint),
    an input file (--input) or standard input, in that order of preference.
    """
    configure_logging(log_level, log_file)

    try:
        options = Options(
            ignore_internals=ignore_internals,
            nullable_array_items=nullable_array_items,
            id_type_mapping=id_type,
        )
    except ValidationError as e:
        log.error(f"invalid id-type mapping: {id_type}")
        log.debug(str(e))
        sys.exit(1)

    try:
        introspection = load_input(endpoint, input_path, headers, timeout)
        result = translate_to_jsonschema(introspection, options)
    except IntrospectionError as e:
        log.error(str(e))
        sys.exit(1)
    except ValidationError as e:
        log.error(f"error converting to JSON Schema: {e}")
        sys.exit(1)

    try:
        write_json_schema(result, output)
    except OSError as e:
        log.error(f"error writing output file: {e}")
        sys.exit(1)

    if output:
        log.success(f"Successfully wrote JSON Schema to {output}")


if __name__ == "__main__":
    cli()
