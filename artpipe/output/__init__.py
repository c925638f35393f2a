"""Display sinks for rendered output."""

from artpipe.output.printer import LINE_TERMINATOR, OutputPrinter

__all__ = ["LINE_TERMINATOR", "OutputPrinter"]
