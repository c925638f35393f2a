"""Local subprocess invoker."""

from __future__ import annotations

import logging
import subprocess
import threading
import time
from typing import Sequence

from artpipe.errors import SpawnError
from artpipe.models.process import ProcessResult
from artpipe.providers.process.base import ProcessInvoker

logger = logging.getLogger(__name__)

# At most one child process in flight per interpreter, whichever thread asks.
_SPAWN_LOCK = threading.Lock()


class LocalProcessInvoker(ProcessInvoker):
    """Runs one command at a time and blocks until it exits.

    Arguments are handed to the child as-is, without a shell. Exit status and
    stderr are captured but not interpreted here. Concurrent callers wait for
    the running child to finish before theirs is started.
    """

    def execute(self, command_name: str, arguments: Sequence[str]) -> ProcessResult:
        args = [command_name, *arguments]
        logger.info("Running %s with %d argument(s)", command_name, len(arguments))
        with _SPAWN_LOCK:
            start = time.monotonic()
            try:
                process = subprocess.run(
                    args,
                    capture_output=True,
                    check=False,
                )
            except OSError as exc:
                raise SpawnError(command_name, exc.strerror or str(exc)) from exc
            except ValueError as exc:
                # embedded NUL bytes in an argument
                raise SpawnError(command_name, str(exc)) from exc
            duration_ms = int((time.monotonic() - start) * 1000)
        logger.debug(
            "%s exited with status %d after %d ms",
            command_name,
            process.returncode,
            duration_ms,
        )
        return ProcessResult(
            args=tuple(args),
            exit_code=process.returncode,
            stdout=process.stdout,
            stderr=process.stderr,
            duration_ms=duration_ms,
        )
