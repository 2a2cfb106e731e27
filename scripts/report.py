"""Report script — print the per-continent summary report.

Usage:
    python -m scripts.report            # text lines against DATABASE_URL
    python -m scripts.report --json     # structured records
    python -m scripts                   # same as the first form
"""

import argparse
import asyncio
import json
import logging
import sys

import structlog

from continent_stats.config.settings import Settings, get_settings
from continent_stats.engine.renderer import ReportConfig
from continent_stats.models.report import ContinentFault, ContinentReport
from continent_stats.reporting.service import generate_report

_LOG_NAME_TO_LEVEL: dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def configure_logging(settings: Settings) -> None:
    """Route stdlib and structlog output through structlog renderers."""
    level = _LOG_NAME_TO_LEVEL[settings.LOG_LEVEL.value]
    renderer = (
        structlog.dev.ConsoleRenderer() if settings.ENVIRONMENT == "dev"
        else structlog.processors.JSONRenderer()
    )
    shared_processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    structlog.configure(
        processors=[*shared_processors, renderer],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )

    # Library modules log through the stdlib; render them the same way.
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(structlog.stdlib.ProcessorFormatter(
        processor=renderer,
        foreign_pre_chain=[
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
        ],
    ))
    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(level)


def report_to_json(report: ContinentReport) -> str:
    """Serialize summaries, rendered values and faults for non-text consumers."""
    return json.dumps(
        {
            "summaries": [s.model_dump(mode="json") for s in report.summaries],
            "rendered": [r.model_dump(mode="json") for r in report.rendered],
            "faults": [f.model_dump(mode="json") for f in report.faults],
            "dropped_continents": report.dropped_continents,
            "catalog_fault": (
                report.catalog_fault.model_dump(mode="json")
                if report.catalog_fault is not None else None
            ),
        },
        indent=2,
    )


async def _run_report(as_json: bool = False) -> ContinentReport:
    """Generate the report against the configured database and print it."""
    from continent_stats.db.session import async_session_factory

    settings = get_settings()
    configure_logging(settings)
    logger = structlog.get_logger()

    def _notify(fault: ContinentFault) -> None:
        logger.warning(
            "continent_fault",
            continent=fault.continent_name,
            error_type=fault.error_type,
            cause=fault.cause,
        )

    async with async_session_factory() as session:
        report = await generate_report(
            session,
            config=ReportConfig.from_settings(settings),
            on_fault=_notify,
        )

    if report.catalog_fault is not None:
        logger.error(
            "catalog_fault",
            error_type=report.catalog_fault.error_type,
            cause=report.catalog_fault.cause,
        )

    if as_json:
        print(report_to_json(report))
    else:
        for line in report.lines:
            print(line)

    return report


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Per-continent summary report.")
    parser.add_argument("--json", action="store_true", help="emit structured JSON")
    args = parser.parse_args(argv)

    asyncio.run(_run_report(as_json=args.json))
    return 0


if __name__ == "__main__":
    sys.exit(main())
