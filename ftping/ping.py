"""The ping loop: resolving the target, sending requests and reading answers."""

from __future__ import annotations

import os
import select
import socket
import sys
import time
from typing import Any

from .icmp import DATA_SIZE, PACKET_SIZE, build_echo_request, parse_reply
from .stats import PingStats

INTERVAL = 1.0


class PingError(Exception):
    """A failure that ends the ping session."""


def resolve(host: str) -> str:
    """Resolve a host name to a dotted IPv4 address."""
    try:
        results = socket.getaddrinfo(host, None, socket.AF_INET, socket.SOCK_RAW)
    except (socket.gaierror, UnicodeError) as exc:
        raise PingError("ping: unknow host") from exc
    if not results:
        raise PingError("ping: unknow host")
    return results[0][4][0]


def format_reply(size: int, ip: str, sequence: int, ttl: int, rtt: float) -> str:
    return f"{size} bytes from {ip}: icmp_seq={sequence} ttl={ttl} time={rtt:.3f} ms"


def format_unreachable(size: int, host: str, source: str) -> str:
    return f"{size} bytes from {host} ({source}): Destination Host Unreachable"


class Pinger:
    """Sends echo requests to one target over a raw socket and keeps statistics."""

    def __init__(self, host: str, ip: str, sock: Any, identifier: int) -> None:
        self.host = host
        self.ip = ip
        self.sock = sock
        self.identifier = identifier & 0xFFFF
        self.sequence = 0
        self.stats = PingStats()
        self._sent_at = 0.0

    def send(self) -> bytes:
        """Send the next echo request and return the packet that went out."""
        self.sequence = (self.sequence + 1) & 0xFFFF
        packet = build_echo_request(self.identifier, self.sequence)
        self._sent_at = time.monotonic()
        try:
            self.sock.sendto(packet, (self.ip, 0))
        except OSError as exc:
            raise PingError(f"sendto: {exc.strerror or exc}") from exc
        self.stats.record_sent()
        return packet

    def receive(self) -> str:
        """Read one waiting datagram, update the statistics and return its report line."""
        try:
            data, address = self.sock.recvfrom(PACKET_SIZE)
        except OSError as exc:
            raise PingError(f"recvfrom: {exc.strerror or exc}") from exc
        rtt = (time.monotonic() - self._sent_at) * 1000.0
        source = address[0] if address else self.ip
        try:
            reply = parse_reply(data)
        except ValueError:
            self.stats.record_lost()
            return format_unreachable(len(data), self.host, source)
        if reply.is_accepted(self.host, self.ip):
            self.stats.record_reply(rtt)
            return format_reply(
                len(data), self.ip, (self.sequence - 1) & 0xFFFF, reply.ttl, rtt
            )
        self.stats.record_lost()
        return format_unreachable(len(data), self.host, source)

    def run(self) -> int:
        """Ping once a second until interrupted, then print the statistics."""
        try:
            print(f"PING {self.host} ({self.ip}): {DATA_SIZE} data bytes", flush=True)
            while True:
                self.send()
                started = time.monotonic()
                readable, _, _ = select.select([self.sock], [], [], INTERVAL)
                if readable:
                    print(self.receive(), flush=True)
                else:
                    self.stats.record_lost()
                remaining = INTERVAL - (time.monotonic() - started)
                if remaining > 0:
                    time.sleep(remaining)
        except KeyboardInterrupt:
            self.close()
            print(self.stats.summary(self.host), end="", flush=True)
            return 0

    def close(self) -> None:
        self.sock.close()

    def __enter__(self) -> Pinger:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print("Usage: ftping [hostname]", file=sys.stderr)
        return 1
    host = args[0]
    try:
        ip = resolve(host)
    except PingError as exc:
        print(exc, file=sys.stderr)
        return 1
    try:
        sock = socket.socket(socket.AF_INET, socket.SOCK_RAW, socket.IPPROTO_ICMP)
    except OSError as exc:
        print(f"socket: {exc.strerror or exc}", file=sys.stderr)
        return 1
    try:
        with Pinger(host, ip, sock, os.getpid()) as pinger:
            return pinger.run()
    except PingError as exc:
        print(exc, file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())