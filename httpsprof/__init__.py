from .common import (
    ProfilerError, TransportError, ConnectError, TlsError, WriteError,
    ReadError, ParseError, EmptyInputError,
)
from .target import Target, resolve
from .client import HTTPSClient
from .decoder import RawResponse, decode
from .profiler import OutcomeRecord, Profiler, parse_status_code, run_cycle
from .summary import SummaryReport, summarize
from .result import ProfileResult
