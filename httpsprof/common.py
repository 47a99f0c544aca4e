import sys

HTTPS_PORT = 443
LINE_TERMINATOR = '\r\n'
READ_CHUNK_SIZE = 4096
DEFAULT_PROFILE_COUNT = 1

# Status codes in [SUCCESS_MIN_STATUSCODE, SUCCESS_MAX_STATUSCODE) count as a
# successful request. 0 means the status line was never found.
SUCCESS_MIN_STATUSCODE = 200
SUCCESS_MAX_STATUSCODE = 400
UNKNOWN_STATUSCODE = 0

LOG_LEVELS = ['TRACE', 'DEBUG', 'INFO', 'WARN', 'ERROR']
DEFAULT_LOG_LEVEL = 'INFO'
_log_level = DEFAULT_LOG_LEVEL


class ProfilerError(Exception):
    pass

class TransportError(ProfilerError):
    """A network-origin failure inside HTTPSClient.fetch()."""
    pass

class ConnectError(TransportError):
    pass

class TlsError(TransportError):
    pass

class WriteError(TransportError):
    pass

class ReadError(TransportError):
    pass

class ParseError(ProfilerError):
    """The response has no blank line separating headers from body."""
    def __init__(self, message: str, raw: str):
        super().__init__(message)
        self.raw = raw

class EmptyInputError(ProfilerError):
    """There are no cycle records to summarize."""
    pass


def is_success_status(code: int) -> bool:
    return SUCCESS_MIN_STATUSCODE <= code < SUCCESS_MAX_STATUSCODE

def set_log_level(level: str):
    global _log_level
    if level not in LOG_LEVELS:
        raise ValueError(f'invalid log level {level}')
    _log_level = level

def get_log_level() -> str:
    return _log_level

def TRACE(val):
    # LOG(val, 'TRACE')
    pass

def DEBUG(val):
    LOG(val, 'DEBUG')

def INFO(val):
    LOG(val, 'INFO')

def WARN(val):
    LOG(val, 'WARN')

def ERROR(val):
    LOG(val, 'ERROR')

def LOG(val, level):
    if LOG_LEVELS.index(level) < LOG_LEVELS.index(_log_level):
        return
    print(f'[{level}] {val}', file=sys.stderr)

def positive_int(n):
    try:
        value = int(n)
    except Exception:
        raise ValueError(f'invalid positive integer {n}')
    if value <= 0:
        raise ValueError(f'invalid positive integer {n}')
    return value

def positive_float(n):
    try:
        value = float(n)
    except Exception:
        raise ValueError(f'invalid positive number {n}')
    if value <= 0:
        raise ValueError(f'invalid positive number {n}')
    return value
