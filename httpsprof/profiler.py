import re
import time
from typing import List, NamedTuple, Optional

from httpsprof.client import HTTPSClient
from httpsprof.decoder import decode
from httpsprof.result import ProfileResult
from httpsprof.target import Target, resolve
from httpsprof.common import *

STATUS_LINE_PATTERN = re.compile(r'^HTTP/1\.[01] (\d+)')


class OutcomeRecord(NamedTuple):
    """The result of one fetch-decode cycle.

    A failed cycle has parsed=False, status_code=0, and body_size=0, but still
    records how long it took to fail.
    """
    status_code: int
    parsed: bool
    body_size: int
    elapsed_ms: int

    @property
    def succeeded(self) -> bool:
        return self.parsed and is_success_status(self.status_code)

    def to_dict(self):
        return {
            'status_code': self.status_code,
            'parsed': self.parsed,
            'success': self.succeeded,
            'size': self.body_size,
            'time_ms': self.elapsed_ms,
        }


def parse_status_code(header_lines: List[str]) -> int:
    """Status code of the first HTTP/1.0 or HTTP/1.1 status line, else 0."""
    for line in header_lines:
        match = STATUS_LINE_PATTERN.match(line)
        if match:
            return int(match.group(1))
    return UNKNOWN_STATUSCODE

def elapsed_ms(start: float) -> int:
    return int((time.monotonic() - start) * 1000)

def run_cycle(client: HTTPSClient, target: Target,
              first_line_only: bool=False) -> OutcomeRecord:
    """Fetch and decode the target once, timing the whole round trip.

    Transport and parse errors never escape: they become a failed record.
    """
    start = time.monotonic()
    try:
        raw = client.fetch(target)
        response = decode(raw, first_line_only=first_line_only)
    except ProfilerError as e:
        WARN(f'{type(e).__name__}: {e}')
        return OutcomeRecord(
            status_code=UNKNOWN_STATUSCODE,
            parsed=False,
            body_size=0,
            elapsed_ms=elapsed_ms(start),
        )

    return OutcomeRecord(
        status_code=parse_status_code(response.header_lines),
        parsed=True,
        body_size=len(response.body.encode('utf-8')),
        elapsed_ms=elapsed_ms(start),
    )


class Profiler:
    def __init__(self, url: str, client: Optional[HTTPSClient]=None,
                 first_line_only: bool=False):
        """
        Repeatedly requests the same URL and collects one OutcomeRecord per
        request.

        Parameters:
        - url: The resource to fetch, with or without an http(s):// prefix.
        - client: The HTTPS client, reused for every request. A new
          connection is still opened for each request.
        - first_line_only: Measure only the first line of each body.
        """
        self.url = url
        self.target = resolve(url)
        self.client = client if client is not None else HTTPSClient()
        self.first_line_only = first_line_only

    def run_cycle(self) -> OutcomeRecord:
        return run_cycle(self.client, self.target,
                         first_line_only=self.first_line_only)

    def run_profile(self, num_cycles: int) -> ProfileResult:
        """
        Runs num_cycles requests sequentially, one after the other. A failed
        request is recorded and the run continues; there are no retries.

        Returns:
        - A ProfileResult with one record per cycle, in order.
        """
        INFO(f'Profiling https://{self.target.host}{self.target.path} '
             f'({num_cycles} requests)')
        result = ProfileResult(
            url=self.url,
            target=self.target,
            port=self.client.port,
            timeout=self.client.timeout,
        )
        for i in range(num_cycles):
            record = self.run_cycle()
            DEBUG(f'Cycle {i}: {record}')
            result.append(record)
        return result
