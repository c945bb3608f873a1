"""Tests for the multi-file Tail driver."""

import io
import tempfile
from pathlib import Path

import pytest

from tailr import Tail, run
from tailr.core.count import PLUS_ZERO, TakeNum
from tailr.errors import FileReadError, TailError
from tailr.file.emitter import open_binary
from tailr.file.tail import format_header

TEN_LINES = "".join(f"Line {i}\n" for i in range(1, 11))


@pytest.fixture
def temp_dir():
    """Create a temporary directory."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def ten(temp_dir):
    path = temp_dir / "ten.txt"
    path.write_text(TEN_LINES)
    return str(path)


@pytest.fixture
def three(temp_dir):
    path = temp_dir / "three.txt"
    path.write_text("a\nb\nc\n")
    return str(path)


@pytest.fixture
def alphabet(temp_dir):
    path = temp_dir / "alphabet.txt"
    path.write_text("abcdefghijklmnopqrstuvwx")
    return str(path)


def tail_output(filenames, **kwargs):
    """Run a Tail and return (stdout bytes, stderr text)."""
    out = io.BytesIO()
    err = io.StringIO()
    Tail(out=out, err=err, **kwargs).run(filenames)
    return out.getvalue(), err.getvalue()


def test_default_ten_lines(ten):
    """A ten line file comes out unchanged."""
    out, err = tail_output([ten])
    assert out == TEN_LINES.encode()
    assert err == ""


def test_bytes_from_start(alphabet):
    out, _ = tail_output([alphabet], byte_spec=TakeNum(10))
    assert out == b"jklmnopqrstuvwx"


def test_byte_mode_wins(alphabet):
    """A byte count overrides the line count for every file."""
    out, _ = tail_output([alphabet], line_spec=TakeNum(0), byte_spec=TakeNum(-3))
    assert out == b"vwx"


def test_clamp_to_whole_file(three):
    out, _ = tail_output([three], line_spec=TakeNum(-5))
    assert out == b"a\nb\nc\n"


def test_plus_zero_and_zero(three):
    assert tail_output([three], line_spec=PLUS_ZERO)[0] == b"a\nb\nc\n"
    assert tail_output([three], line_spec=TakeNum(0))[0] == b""


def test_headers(three, alphabet):
    """Several files get headers separated by a blank line."""
    out, _ = tail_output([three, alphabet])
    expected = f"==> {three} <==\na\nb\nc\n\n==> {alphabet} <==\nabcdefghijklmnopqrstuvwx"
    assert out == expected.encode()


def test_quiet(three, alphabet):
    out, _ = tail_output([three, alphabet], quiet=True)
    assert out == b"a\nb\nc\nabcdefghijklmnopqrstuvwx"


def test_single_file_has_no_header(three):
    out, _ = tail_output([three])
    assert b"==>" not in out


def test_missing_file_is_skipped(temp_dir, three, alphabet):
    """A missing file is reported and the rest still print."""
    missing = str(temp_dir / "missing.txt")
    out, err = tail_output([three, missing, alphabet], quiet=True)
    assert out == b"a\nb\nc\nabcdefghijklmnopqrstuvwx"
    assert err == f"{missing}: No such file or directory\n"


def test_header_numbering_counts_failed_files(temp_dir, three):
    """Only the very first filename goes without a leading blank line."""
    missing = str(temp_dir / "missing.txt")
    out, _ = tail_output([missing, three])
    assert out == f"\n==> {three} <==\na\nb\nc\n".encode()


def test_directory_is_skipped(temp_dir, three):
    """A directory can't be opened and is reported like a missing file."""
    out, err = tail_output([str(temp_dir), three], quiet=True)
    assert out == b"a\nb\nc\n"
    assert err.startswith(f"{temp_dir}: ")


def test_read_error_is_fatal(three, alphabet):
    """A failure after a successful open aborts the run."""
    calls = []

    def flaky_opener(path):
        calls.append(path)
        if len(calls) == 2:
            raise OSError(5, "Input/output error")
        return open_binary(path)

    out = io.BytesIO()
    tail = Tail(out=out, err=io.StringIO(), quiet=True, opener=flaky_opener)
    with pytest.raises(FileReadError) as e:
        tail.run([three, alphabet])

    assert str(e.value) == f"{three}: Input/output error"
    assert isinstance(e.value, TailError)
    assert isinstance(e.value.__cause__, OSError)
    assert alphabet not in calls


def test_run_function(three):
    out = io.BytesIO()
    run([three], line_spec=TakeNum(2), out=out, err=io.StringIO())
    assert out.getvalue() == b"b\nc\n"


def test_format_header():
    assert format_header("x.log", first=True) == b"==> x.log <==\n"
    assert format_header("x.log", first=False) == b"\n==> x.log <==\n"


class BrokenOut(io.BytesIO):
    """Output stream whose reader has gone away."""

    def write(self, data):
        raise BrokenPipeError(32, "Broken pipe")


class TrackingOpener:
    """Opener that records every handle it hands out."""

    def __init__(self):
        self.handles = []

    def __call__(self, path):
        fh = open_binary(path)
        self.handles.append(fh)
        return fh


def test_output_error_is_not_a_read_error(three):
    """A broken stdout surfaces as itself, not as a failure of the input file."""
    tail = Tail(out=BrokenOut(), err=io.StringIO())
    with pytest.raises(BrokenPipeError):
        tail.run([three])


def test_output_error_in_byte_mode(alphabet):
    tail = Tail(byte_spec=TakeNum(-3), out=BrokenOut(), err=io.StringIO())
    with pytest.raises(BrokenPipeError):
        tail.run([alphabet])


def test_handle_closed_when_header_write_fails(three, alphabet):
    """The scan handle is released even if writing the header fails."""
    opener = TrackingOpener()
    tail = Tail(out=BrokenOut(), err=io.StringIO(), opener=opener)
    with pytest.raises(BrokenPipeError):
        tail.run([three, alphabet])

    assert len(opener.handles) == 1
    assert opener.handles[0].closed
