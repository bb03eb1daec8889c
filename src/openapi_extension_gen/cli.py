"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from openapi_extension_gen.artifact_planning import EXTENSION_NAME_PREFIX
from openapi_extension_gen.configuration import ConfigurationError, load_configuration
from openapi_extension_gen.generation import (
    GenerationError,
    GenerationRequest,
    generate_extension,
)
from openapi_extension_gen.type_classification import ExtensionValidationError

USAGE_EXIT_CODE = -1


class CliError(Exception):
    """Custom CLI error."""


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="openapi-extension-gen")
@click.argument("schema_file", type=click.Path(path_type=str))
@click.option(
    "--out_dir",
    "--out-dir",
    "out_dir",
    required=True,
    type=click.Path(path_type=str),
    help="Directory under which openapi_extensions_<name>/ is written",
)
@click.option(
    "--extension",
    "extension_mode",
    is_flag=True,
    default=False,
    hidden=True,
    help="Accepted for plugin-style invocations; has no effect.",
)
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Optional YAML/JSON generator configuration file",
)
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log each generation step.")
def cli(
    schema_file: str,
    out_dir: str,
    extension_mode: bool,
    config_path: str | None,
    verbose: bool,
) -> None:
    """Generate proto and decoder sources for an OpenAPI vendor extension schema.

    SCHEMA_FILE must be named after the extension, starting with 'x-'.
    """
    del extension_mode
    if not Path(schema_file).stem.startswith(EXTENSION_NAME_PREFIX):
        raise click.BadParameter(
            f"Schema file name has to start with '{EXTENSION_NAME_PREFIX}'.",
            param_hint="SCHEMA_FILE",
        )
    if verbose:
        logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    try:
        settings = load_configuration(config_path)
        outcome = generate_extension(
            GenerationRequest(schema_path=schema_file, output_root=out_dir),
            settings=settings,
        )
    except (ConfigurationError, ExtensionValidationError, GenerationError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(outcome.layout.extension_dir))


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.UsageError as exc:
        exc.show()
        return USAGE_EXIT_CODE
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
