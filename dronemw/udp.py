"""UDP datagram transport, registered under the "udp" scheme."""

from __future__ import annotations

import socket
import sys
from typing import Optional

from dronemw.transport import Factory, Transport


class UdpTransport(Transport):
    """Sends each packet as one IPv4 UDP datagram, best effort."""

    def __init__(self) -> None:
        self._socket: Optional[socket.socket] = None
        self._endpoint: Optional[tuple] = None

    def connect(self, host: str, port: int) -> bool:
        """Resolve host:port and open the socket; return False on failure."""
        try:
            infos = socket.getaddrinfo(host, port, socket.AF_INET, socket.SOCK_DGRAM)
            self._endpoint = infos[0][4]
            self._socket = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
            return True
        except (OSError, OverflowError, IndexError) as exc:
            print(f"[UDP] connect error: {exc}", file=sys.stderr)
            return False

    def send(self, data: bytes) -> bool:
        """Send data as one datagram; return False on any error."""
        if self._socket is None or self._endpoint is None:
            return False
        try:
            self._socket.sendto(data, self._endpoint)
            return True
        except OSError:
            return False

    def close(self) -> None:
        """Close the socket, ignoring errors."""
        if self._socket is not None:
            try:
                self._socket.close()
            except OSError:
                pass


Factory.instance().register_backend("udp", UdpTransport)