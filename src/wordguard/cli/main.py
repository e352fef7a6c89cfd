"""Entry point for the ``wordguard`` command-line tool."""

import click

from wordguard import __version__
from wordguard.cli.commands.check import check
from wordguard.cli.commands.validate_payload import validate_payload


@click.group()
@click.version_option(__version__, prog_name="wordguard")
def main() -> None:
    """WordGuard - validate word-game input from the command line."""


main.add_command(check)
main.add_command(validate_payload)


if __name__ == "__main__":
    main()
