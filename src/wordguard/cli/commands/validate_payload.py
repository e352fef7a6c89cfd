"""CLI command for validating request payload files.

Implements the 'wordguard validate-payload' command, which checks each
payload in a YAML file against a request model and reports failures as
structured error responses.
"""

from __future__ import annotations

import json
import sys
from typing import Any

import click
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from wordguard.cli.common import resolve_command_config
from wordguard.config.loader import ConfigLoader
from wordguard.lib.error_report import ErrorResponse, build_validation_error_response
from wordguard.lib.errors import WordGuardError
from wordguard.lib.logging_config import get_logger
from wordguard.lib.ui import format_result
from wordguard.models.requests import (
    CalculateScoreRequest,
    ScoreRequest,
    WordFinderRequest,
)

logger = get_logger(__name__)

REQUEST_MODELS: dict[str, type[BaseModel]] = {
    "calculate": CalculateScoreRequest,
    "score": ScoreRequest,
    "finder": WordFinderRequest,
}


def validate_payloads(
    payloads: list[dict[str, Any]], model: type[BaseModel]
) -> list[ErrorResponse | None]:
    """Validate each payload, returning None for passes and a report otherwise."""
    results: list[ErrorResponse | None] = []
    for payload in payloads:
        try:
            model.model_validate(payload)
        except PydanticValidationError as e:
            results.append(build_validation_error_response(e))
        else:
            results.append(None)
    return results


@click.command(name="validate-payload")
@click.argument("payload_file", type=click.Path())
@click.option(
    "--model",
    "model_name",
    type=click.Choice(sorted(REQUEST_MODELS)),
    default="calculate",
    help="Request model to validate against (default: calculate)",
)
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    help="Print results as a JSON array",
)
@click.option(
    "--color/--no-color",
    default=None,
    help="Force colored output on or off (default: auto-detect)",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output with debug information",
)
@click.option(
    "--quiet",
    "-q",
    is_flag=True,
    help="Only log warnings and errors",
)
def validate_payload(
    payload_file: str,
    model_name: str,
    as_json: bool,
    color: bool | None,
    verbose: bool,
    quiet: bool,
) -> None:
    """Validate request payloads in PAYLOAD_FILE.

    PAYLOAD_FILE is a YAML file holding one payload mapping or a list of
    them. ${VAR} references are replaced with environment values.

    Example:

        wordguard validate-payload requests.yaml

        wordguard validate-payload finder.yaml --model finder --json

    Exits with status 1 if any payload is rejected.
    """
    try:
        config = resolve_command_config(verbose, quiet, color)
        logger.info(
            f"Validate-payload command invoked: file={payload_file}, model={model_name}"
        )
        payloads = ConfigLoader().load_payloads(payload_file)
    except WordGuardError as e:
        logger.error(f"Failed to load payloads: {e}", exc_info=True)
        click.secho("Error: Failed to load payloads", fg="red", err=True)
        click.echo(f"  {str(e)}", err=True)
        sys.exit(1)

    results = validate_payloads(payloads, REQUEST_MODELS[model_name])
    failures = sum(1 for result in results if result is not None)

    if as_json:
        output = [
            {
                "index": i,
                "valid": result is None,
                "error": result.model_dump(mode="json") if result else None,
            }
            for i, result in enumerate(results)
        ]
        click.echo(json.dumps(output, indent=2))
    else:
        for i, result in enumerate(results):
            label = f"payload[{i}]"
            if result is None:
                click.echo(format_result(label, True, force_tty=config.color))
                continue
            click.echo(
                format_result(
                    label, False, f"{label}: {result.message}", force_tty=config.color
                )
            )
            for field, message in (result.details or {}).items():
                click.echo(f"    {field}: {message}")

    logger.info(f"Validated {len(results)} payload(s), {failures} rejected")
    if failures:
        sys.exit(1)
