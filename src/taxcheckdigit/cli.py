"""
CLI interface for taxcheckdigit.

Commands:
- taxcheckdigit calculate - compute the check digit(s) of a code
- taxcheckdigit validate - validate complete codes
- taxcheckdigit countries - list supported countries
"""

import logging
import sys

import click

from . import __version__
from .config import LOG_LEVELS, configure_logging
from .exceptions import CheckDigitError, UnknownCountryError
from .registry import available_countries, get_check_digit

logger = logging.getLogger(__name__)


def _routine(country: str):
    try:
        return get_check_digit(country)
    except UnknownCountryError:
        raise click.BadParameter(
            f"unsupported country {country!r}, choose from {', '.join(available_countries())}",
            param_hint="COUNTRY",
        ) from None


@click.group()
@click.version_option(version=__version__, prog_name="taxcheckdigit")
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Override TAXCHECKDIGIT_LOG_LEVEL",
)
def cli(log_level):
    """
    Check digits of national tax and VAT identification numbers.

    \b
    taxcheckdigit calculate DE 0247629135
    taxcheckdigit validate FR 83404833048
    """
    configure_logging(log_level)


@cli.command()
@click.argument("country")
@click.argument("code")
def calculate(country: str, code: str):
    """Calculate the check digit(s) of CODE (without check digits)."""
    routine = _routine(country)
    try:
        check = routine.calculate(code)
    except CheckDigitError as e:
        click.echo(f"[ERROR] {code}: {e}", err=True)
        sys.exit(1)

    # French keys lead the SIREN
    full = check + code if routine.country == "FR" else code + check
    click.echo(f"{check}\t{full}")


@cli.command()
@click.argument("country")
@click.argument("codes", nargs=-1, required=True)
def validate(country: str, codes):
    """Validate one or more complete CODES."""
    routine = _routine(country)
    all_valid = True
    for code in codes:
        valid = routine.is_valid(code)
        all_valid = all_valid and valid
        click.echo(f"{code}\t{'valid' if valid else 'invalid'}")
    logger.debug("%d code(s) checked for %s", len(codes), routine.country)
    if not all_valid:
        sys.exit(1)


@cli.command()
def countries():
    """List supported countries."""
    for country in available_countries():
        routine = get_check_digit(country)
        click.echo(f"{country}\t{routine.length}\t{type(routine).__name__}")


def main():
    cli()


if __name__ == "__main__":
    main()
