"""
Split a raw HTTP response into its header lines and its body.

There is no general HTTP parser here. The client sends an HTTP/1.0 request
and reads until the server closes the connection, so the body is simply
everything after the first blank line. Content-Length, chunked transfer
encoding, and compression are not interpreted.
"""
from typing import List, NamedTuple

from httpsprof.common import *


class RawResponse(NamedTuple):
    header_lines: List[str]
    body: str


def find_separator(lines: List[str]) -> int:
    """Index of the first blank line, or -1 if there is none.

    The last element of a split is never a separator since no line
    terminator follows it.
    """
    for i, line in enumerate(lines[:-1]):
        if len(line) == 0:
            return i
    return -1

def decode(raw: str, first_line_only: bool=False) -> RawResponse:
    """
    Parameters:
    - raw: The full response text.
    - first_line_only: Keep only the first line of the body, dropping the
      rest, for comparison against tools that truncate the body that way.

    Raises a ParseError carrying the raw text if there is no separator.
    """
    lines = raw.split(LINE_TERMINATOR)
    i = find_separator(lines)
    if i < 0:
        raise ParseError('cannot find the end of the HTTP header', raw)

    header_lines = lines[:i]
    body_lines = lines[i + 1:]
    if first_line_only:
        body = body_lines[0]
    else:
        body = LINE_TERMINATOR.join(body_lines)

    DEBUG(f'Header (len={len(header_lines)}):\n{header_lines}')
    DEBUG(f'Body (len={len(body)})')
    return RawResponse(header_lines=header_lines, body=body)
