from typing import NamedTuple

SCHEME_PREFIXES = ['http://', 'https://']


class Target(NamedTuple):
    host: str
    path: str


def strip_scheme(url: str) -> str:
    for prefix in SCHEME_PREFIXES:
        if url.startswith(prefix):
            return url[len(prefix):]
    return url

def resolve(url: str) -> Target:
    """Split a URL into the host to connect to and the path to request.

    A leading http:// or https:// is dropped. Everything up to the first '/'
    is the host and the rest, including that '/', is the path. Without a '/'
    the whole string is the host and the path is '/'. The host is not
    validated; an empty host only fails once the client tries to connect.
    """
    url = strip_scheme(url)
    i = url.find('/')
    if i < 0:
        return Target(host=url, path='/')
    return Target(host=url[:i], path=url[i:])
