import errno
import os

import pytest

from cubed.errors import CubError, format_error


def test_error_keeps_message_and_code():
    error = CubError("Invalid map.", errno.ENOEXEC)
    assert error.message == "Invalid map."
    assert error.code == errno.ENOEXEC
    assert str(error) == "Invalid map."


def test_error_can_be_raised_and_caught():
    with pytest.raises(CubError) as info:
        raise CubError("Failed to open file.", errno.ENOENT)
    assert info.value.code == errno.ENOENT


def test_format_error_layout():
    error = CubError("Invalid color.", errno.ENOEXEC)
    lines = format_error(error).splitlines()
    assert lines[0] == "Error"
    assert lines[1] == "Invalid color."
    assert lines[2] == (
        f"Error code: {errno.ENOEXEC} - {os.strerror(errno.ENOEXEC)}"
    )


def test_format_error_ends_with_newline():
    error = CubError("Missing argument.", errno.EINVAL)
    text = format_error(error)
    assert text.endswith("\n")
    assert text.count("\n") == 3