"""Process invoker implementations and interfaces."""

from artpipe.providers.process.base import ProcessInvoker
from artpipe.providers.process.local import LocalProcessInvoker

__all__ = ["LocalProcessInvoker", "ProcessInvoker"]
