from typing import List, NamedTuple, Sequence

import numpy as np

from httpsprof.common import *


class SummaryReport(NamedTuple):
    total: int
    success: int
    success_ratio: int
    min_time_ms: int
    mean_time_ms: int
    median_time_ms: int
    max_time_ms: int
    min_size: int
    max_size: int
    error_codes: List[int]

    def to_dict(self):
        return {
            'total': self.total,
            'success': self.success,
            'success_ratio': self.success_ratio,
            'min_size': self.min_size,
            'max_size': self.max_size,
            'min_time_ms': self.min_time_ms,
            'mean_time_ms': self.mean_time_ms,
            'median_time_ms': self.median_time_ms,
            'max_time_ms': self.max_time_ms,
            'error_codes': list(self.error_codes),
        }

    def format(self) -> str:
        lines = [
            'Summary:',
            'Requests made:',
            f'    Total    {self.total}',
            f'    Success  {self.success}',
            f'    Ratio    {self.success_ratio}%',
            'Size(bytes) per request:',
            f'    Smallest {self.min_size}',
            f'    Largest  {self.max_size}',
            'Time(ms) per request:',
            f'    Fastest  {self.min_time_ms}',
            f'    Mean     {self.mean_time_ms}',
            f'    Median   {self.median_time_ms}',
            f'    Slowest  {self.max_time_ms}',
            f'Error code encountered: {list(self.error_codes)}',
        ]
        return '\n'.join(lines)


def summarize(records: Sequence) -> SummaryReport:
    """
    Aggregates the OutcomeRecords of a run. All statistics are integers:
    the mean and ratio truncate, and for an even number of records the median
    is the upper of the two middle values.

    Raises an EmptyInputError if there are no records.
    """
    n = len(records)
    if n == 0:
        raise EmptyInputError('no records to summarize')

    times = np.sort(np.array([r.elapsed_ms for r in records], dtype=np.int64))
    sizes = np.sort(np.array([r.body_size for r in records], dtype=np.int64))

    success = sum(1 for r in records if r.succeeded)
    error_codes = {r.status_code for r in records}
    error_codes = sorted(code for code in error_codes
        if code != UNKNOWN_STATUSCODE and not is_success_status(code))

    return SummaryReport(
        total=n,
        success=success,
        success_ratio=success * 100 // n,
        min_time_ms=int(times[0]),
        mean_time_ms=int(times.sum()) // n,
        median_time_ms=int(times[n // 2]),
        max_time_ms=int(times[-1]),
        min_size=int(sizes[0]),
        max_size=int(sizes[-1]),
        error_codes=error_codes,
    )
