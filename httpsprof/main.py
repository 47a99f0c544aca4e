import argparse
import sys

from httpsprof.client import HTTPSClient
from httpsprof.profiler import Profiler
from httpsprof.common import *


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='httpsprof',
        description='Profile repeated HTTP/1.0 GET requests over TLS',
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument('-u', '--url', type=str, required=True,
        metavar='https://...', help='the target to fetch')
    parser.add_argument('-p', '--profile', type=positive_int,
        default=DEFAULT_PROFILE_COUNT, metavar='N',
        help='the number of requests')
    parser.add_argument('-t', '--timeout', type=positive_float,
        metavar='SECONDS',
        help='Give up on a request after this many seconds without progress')
    parser.add_argument('--port', type=int, default=HTTPS_PORT,
        help='TCP port of the server')
    parser.add_argument('--first-line-only', action='store_true',
        help='Only measure the first line of each response body')

    ###########################################################################
    # Output
    ###########################################################################
    output = parser.add_argument_group('output')
    output.add_argument('--json', action='store_true',
        help='Also print the per-request results and summary as JSON')
    output.add_argument('--pretty', action='store_true',
        help='Indent the JSON output')
    output.add_argument('--plot', type=str, metavar='FILE',
        help='Save a plot of the time per request, e.g., latency.pdf')
    output.add_argument('-v', '--verbose', action='store_true',
        help='Log requests, raw responses, and each cycle to stderr')
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    if args.verbose:
        set_log_level('DEBUG')

    client = HTTPSClient(port=args.port, timeout=args.timeout)
    profiler = Profiler(args.url, client=client,
                        first_line_only=args.first_line_only)
    result = profiler.run_profile(args.profile)

    print(result.summarize().format())
    if args.json or args.pretty:
        result.print(pretty_print=args.pretty)
    if args.plot is not None:
        result.plot(args.plot)
        INFO(f'Saved plot to {args.plot}')
    return 0


if __name__ == '__main__':
    sys.exit(main())
