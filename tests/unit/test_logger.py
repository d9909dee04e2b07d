import io

from pdfrenamer.logger import Logger


def test_log_key_values():
    stream = io.StringIO()
    Logger(stream=stream).info("pdf.open", page=2)

    line = stream.getvalue().strip()
    assert line.endswith("INFO: pdf.open page=2")


def test_log_quotes_values_with_spaces():
    stream = io.StringIO()
    Logger(stream=stream).info("extract", prompt="use ISO dates", format="")

    assert 'prompt="use ISO dates" format=""' in stream.getvalue()


def test_debug_hidden_unless_verbose():
    quiet = io.StringIO()
    Logger(verbose=False, stream=quiet).debug("extract.markdown", markdown="# x")
    assert quiet.getvalue() == ""

    loud = io.StringIO()
    Logger(verbose=True, stream=loud).debug("extract.markdown", markdown="# x")
    assert "DEBUG: extract.markdown" in loud.getvalue()
