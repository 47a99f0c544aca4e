import socket
import ssl
from typing import Optional

from httpsprof.common import *
from httpsprof.target import Target


class HTTPSClient:
    def __init__(self, port: int=HTTPS_PORT, timeout: Optional[float]=None,
                 context: Optional[ssl.SSLContext]=None):
        """
        Minimal HTTP/1.0 client that sends a single GET request per TLS
        connection and reads the response until the server closes the stream.

        Parameters:
        - port: The TCP port to connect to.
        - timeout: If provided, the number of seconds to wait on connect, the
          TLS handshake, the request write, and each read before failing.
          Otherwise a server that never closes the connection blocks forever.
        - context: The TLS context shared by every request. Defaults to the
          system trust store with hostname verification.
        """
        self.port = port
        self.timeout = timeout
        if context is None:
            context = ssl.create_default_context()
        self.context = context

    def build_request(self, target: Target) -> str:
        return f'GET {target.path} HTTP/1.0{LINE_TERMINATOR}'\
               f'Host: {target.host}{LINE_TERMINATOR}'\
               f'Accept: */*{LINE_TERMINATOR}'\
               f'{LINE_TERMINATOR}'

    def fetch(self, target: Target) -> str:
        """Returns the full response, decoded as UTF-8, of a GET request.

        Invalid UTF-8 sequences are replaced rather than treated as errors.
        Raises a ConnectError, TlsError, WriteError, or ReadError depending on
        where the request failed. The connection is always closed on return.
        """
        request = self.build_request(target)
        DEBUG(f'Request:\n{request}')

        with self._connect(target) as sock:
            with self._handshake(sock, target) as stream:
                self._write(stream, request.encode('utf-8'))
                data = self._read(stream)

        response = data.decode('utf-8', errors='replace')
        DEBUG(f'Raw response:\n {response}')
        return response

    def _connect(self, target: Target) -> socket.socket:
        if not target.host:
            raise ConnectError('cannot connect to an empty host')
        try:
            return socket.create_connection((target.host, self.port),
                                            timeout=self.timeout)
        except (OSError, ValueError) as e:
            raise ConnectError(
                f'connect to {target.host}:{self.port} failed: {e}') from e

    def _handshake(self, sock: socket.socket, target: Target) -> ssl.SSLSocket:
        try:
            return self.context.wrap_socket(sock, server_hostname=target.host)
        except (OSError, ValueError) as e:
            raise TlsError(f'TLS handshake with {target.host} failed: {e}') from e

    def _write(self, stream: ssl.SSLSocket, data: bytes):
        try:
            stream.sendall(data)
        except OSError as e:
            raise WriteError(f'request write failed: {e}') from e

    def _read(self, stream: ssl.SSLSocket) -> bytes:
        chunks = []
        while True:
            try:
                chunk = stream.recv(READ_CHUNK_SIZE)
            except OSError as e:
                raise ReadError(f'response read failed after '
                                f'{sum(len(c) for c in chunks)} bytes: {e}') from e
            if not chunk:
                break
            chunks.append(chunk)
        return b''.join(chunks)
