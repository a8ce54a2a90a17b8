"""Command line entry point for ``create-mcp-server``."""

from __future__ import annotations

import argparse
import logging
import os
from typing import Sequence

from . import __version__
from .config import LOG_LEVEL_ENV, ScaffoldConfig
from .console import ConsolePrompt, ConsoleReporter, Prompt, Reporter
from .errors import ScaffoldError, TemplateNotFoundError, UnsafeDestinationError
from .readme import build_usage
from .scaffold import ProjectScaffolder


LOGGER = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="create-mcp-server",
        description=(
            "Create a new MCP server project in the current directory. "
            "The directory must be empty or contain only a .git directory."
        ),
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _configure_logging() -> None:
    level_name = os.environ.get(LOG_LEVEL_ENV, "WARNING").strip().upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
    )


def _report_unsafe_destination(reporter: Reporter, exc: UnsafeDestinationError) -> None:
    reporter.warning("⚠️  The current directory is not empty!")
    reporter.line(f"Found: {', '.join(exc.entries)}")
    reporter.line("To avoid overwriting existing files, please run this command in an empty directory.")
    reporter.line("You can create a new directory and run the command there:")
    reporter.line("\n  mkdir my-mcp-server && cd my-mcp-server && create-mcp-server\n")


def _report_missing_template(reporter: Reporter, config: ScaffoldConfig) -> None:
    reporter.error("⚠️  Source directory not found!")
    reporter.line("This is likely an issue with the package installation.")
    reporter.line(f"Please report this issue at: {config.issue_url}")


def run(
    config: ScaffoldConfig,
    prompt: Prompt,
    reporter: Reporter,
    **scaffolder_options,
) -> int:
    """Scaffold a project for ``config`` and return the process exit code."""

    reporter.line()
    reporter.info("🚀 Creating a new MCP server project...")
    reporter.line()

    scaffolder = ProjectScaffolder(config, prompt, reporter, **scaffolder_options)
    try:
        result = scaffolder.run()
    except UnsafeDestinationError as exc:
        _report_unsafe_destination(reporter, exc)
        return 1
    except TemplateNotFoundError:
        _report_missing_template(reporter, config)
        return 1
    except ScaffoldError as exc:
        reporter.error(f"\n❌ Error creating MCP server project: {exc}")
        reporter.line(f"Please report this issue at: {config.issue_url}")
        return 1
    except Exception as exc:
        LOGGER.debug("unexpected failure", exc_info=True)
        reporter.error(f"\n❌ Unexpected error: {exc}")
        reporter.line(f"Please report this issue at: {config.issue_url}")
        return 1

    reporter.success("\n🎉 MCP server project created successfully!")
    reporter.line()
    reporter.line(build_usage(result.project_name, result.project_dir))
    reporter.line("Happy coding! 🚀\n")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    parser.parse_args(argv)
    _configure_logging()

    config = ScaffoldConfig.from_environment()
    return run(config, ConsolePrompt(), ConsoleReporter())


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
