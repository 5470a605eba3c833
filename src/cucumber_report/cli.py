"""
Command-line interface for the cucumber report generator.
"""

import logging
import sys
from typing import Optional

import click

from .config import ConfigurationError, load_options, validate_options
from .exceptions import ReportError
from .report import ReportBuilder
from .reporting import ConsoleReporter, HTMLReporter, JSONReporter

logger = logging.getLogger(__name__)


@click.command()
@click.option(
    "--source",
    "-s",
    type=click.Path(),
    help="Path to the cucumber JSON results",
)
@click.option(
    "--template",
    "-t",
    type=click.Path(),
    help="Path to an alternate Jinja2 template",
)
@click.option(
    "--name",
    "-n",
    type=str,
    help="Report file name (default: index.html)",
)
@click.option(
    "--dest",
    "-d",
    type=click.Path(),
    help="Output directory (default: ./reports)",
)
@click.option(
    "--logo",
    "-l",
    type=click.Path(),
    help="Path to a logo image (default: bundled cucumber logo)",
)
@click.option(
    "--screenshots",
    type=click.Path(),
    help="Directory of extra images to embed in the report",
)
@click.option(
    "--config",
    type=click.Path(exists=True),
    help="Path to configuration file (YAML)",
)
@click.option(
    "--format",
    "report_format",
    type=click.Choice(["html", "json"]),
    default="html",
    help="Report format",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"]),
    default="INFO",
    help="Logging level",
)
def main(
    source: Optional[str],
    template: Optional[str],
    name: Optional[str],
    dest: Optional[str],
    logo: Optional[str],
    screenshots: Optional[str],
    config: Optional[str],
    report_format: str,
    log_level: str,
) -> None:
    """
    Cucumber Report - Turn cucumber JSON results into a readable report.

    Examples:

      # Write ./reports/index.html
      cucumber-report --source results/cucumber.json

      # Custom destination and template
      cucumber-report -s cucumber.json -d out -t my-template.html.j2

      # Dump the aggregated model as JSON
      cucumber-report -s cucumber.json --format json
    """
    logging.basicConfig(
        level=getattr(logging, log_level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
    )

    try:
        logger.info("Loading configuration...")
        if report_format == "json" and not name:
            name = "index" + JSONReporter.extension
        options = load_options(
            config,
            source=source,
            template=template,
            name=name,
            dest=dest,
            logo=logo,
            screenshots=screenshots,
        )

        errors = validate_options(options)
        if errors:
            click.echo("Configuration errors:", err=True)
            for error in errors:
                click.echo(f"  - {error}", err=True)
            sys.exit(1)

        if report_format == "json":
            reporter = JSONReporter()
        else:
            reporter = HTMLReporter(options.template)

        built = ReportBuilder(options).run(reporter)
        click.echo(ConsoleReporter().generate(built.model))
        click.echo(f"Report written to: {options.dest}/{options.name}")

        # Failing tests are documented by the report, not by the exit code
        sys.exit(0)

    except ConfigurationError as e:
        logger.error("Configuration error: %s", e)
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(1)
    except FileNotFoundError as e:
        logger.error("File not found: %s", e)
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    except ReportError as e:
        logger.error("Report generation failed: %s", e)
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    except Exception as e:
        logger.exception("Unexpected error: %s", e)
        click.echo(f"Unexpected error: {e}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
