import io

from artpipe.output import LINE_TERMINATOR, OutputPrinter


def test_print_passes_bytes_through_with_one_terminator():
    sink = io.BytesIO()
    data = b"/*********/\n/* Hello */\n/*********/\n\x00\xff"
    OutputPrinter(sink).print(data)
    assert sink.getvalue() == data + LINE_TERMINATOR


def test_print_empty_output_writes_only_terminator():
    sink = io.BytesIO()
    OutputPrinter(sink).print(b"")
    assert sink.getvalue() == b"\n"


def test_print_line_encodes_text():
    sink = io.BytesIO()
    OutputPrinter(sink).print_line("Hello, world!")
    assert sink.getvalue() == b"Hello, world!\n"


def test_defaults_to_stdout(capsysbinary):
    OutputPrinter().print(b"boxed")
    assert capsysbinary.readouterr().out == b"boxed\n"
