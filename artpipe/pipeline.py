"""Load the banner resource, render it externally and print the result."""

from __future__ import annotations

import logging
import os
import sys

from artpipe.config import Settings, load_settings
from artpipe.errors import ConfigError, ExternalCommandError, ReadError, SpawnError
from artpipe.logging_config import configure_logging
from artpipe.memory.arena import Arena
from artpipe.models.process import ProcessResult
from artpipe.output.printer import OutputPrinter
from artpipe.providers.loader import FileLoader, LocalFileLoader
from artpipe.providers.process import LocalProcessInvoker, ProcessInvoker

logger = logging.getLogger(__name__)

# Shell convention for "command not found".
SPAWN_FAILURE_EXIT_CODE = 127

EXIT_OK = 0
EXIT_READ_ERROR = 1
EXIT_COMMAND_ERROR = 2
EXIT_CONFIG_ERROR = 3


def run(
    settings: Settings,
    printer: OutputPrinter,
    invoker: ProcessInvoker | None = None,
    loader: FileLoader | None = None,
) -> ProcessResult:
    """Print the greeting, then the rendering of ``settings.resource_path``.

    Raises ``ReadError`` if the resource cannot be loaded. Command failures
    are handled according to ``settings.on_command_error``.
    """
    invoker = invoker or LocalProcessInvoker()
    loader = loader or LocalFileLoader()

    printer.print_line(settings.greeting)
    with Arena(settings.arena_region_size) as arena:
        content = loader.load(settings.resource_path, arena)
        logger.info("Loaded %d bytes from %s", len(content), content.path)
        # fsdecode round-trips through the same encoding subprocess uses for argv
        text = os.fsdecode(bytes(content))
    result = _invoke(settings, invoker, text)
    printer.print(result.stdout)
    return result


def _invoke(settings: Settings, invoker: ProcessInvoker, text: str) -> ProcessResult:
    strict = settings.on_command_error == "raise"
    try:
        result = invoker.execute(settings.command, [text])
    except SpawnError as exc:
        if strict:
            raise
        logger.warning("%s; continuing with empty output", exc)
        return ProcessResult(
            args=(settings.command, text),
            exit_code=SPAWN_FAILURE_EXIT_CODE,
            stdout=b"",
            stderr=b"",
            duration_ms=0,
        )

    if not result.ok:
        if strict:
            raise ExternalCommandError(result)
        logger.warning(
            "%s exited with status %d; printing captured output anyway",
            settings.command,
            result.exit_code,
        )
    if result.stderr:
        logger.warning(
            "%s wrote to stderr: %s",
            settings.command,
            result.stderr.decode("utf-8", errors="replace").strip(),
        )
    return result


def main(
    settings: Settings | None = None,
    printer: OutputPrinter | None = None,
) -> int:
    try:
        if settings is None:
            settings = load_settings()
        configure_logging(settings.log_path, settings.log_level)
    except (ConfigError, OSError) as exc:
        print(f"artpipe: {exc}", file=sys.stderr)
        return EXIT_CONFIG_ERROR
    printer = printer or OutputPrinter()

    try:
        run(settings, printer)
    except ReadError as exc:
        logger.error("Aborting: %s", exc)
        return EXIT_READ_ERROR
    except (SpawnError, ExternalCommandError) as exc:
        logger.error("Aborting: %s", exc)
        return EXIT_COMMAND_ERROR
    return EXIT_OK
