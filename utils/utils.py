from typing import TextIO


def read_line(stream: TextIO) -> str:
    """
    Read one line of operator input without its line ending.
    End of input reads as an empty line.
    """
    line = stream.readline()
    return line.rstrip('\r\n')


def write(stream: TextIO, text: str, end: str = '') -> None:
    """Write text and flush so prompts show up before we block on input."""
    stream.write(f"{text}{end}")
    stream.flush()
