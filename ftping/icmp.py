"""ICMP echo packets: checksums, echo requests and reply parsing."""

from __future__ import annotations

import socket
import struct
from dataclasses import dataclass

PACKET_SIZE = 64
HEADER_SIZE = 8
DATA_SIZE = PACKET_SIZE - HEADER_SIZE
ICMP_ECHOREPLY = 0
ICMP_ECHO = 8

_IP_MIN_HEADER = 20


def checksum(data: bytes) -> int:
    """Return the Internet checksum (one's complement of the one's complement sum)."""
    if len(data) % 2:
        data = bytes(data) + b"\x00"
    total = sum(word for (word,) in struct.iter_unpack("!H", data))
    while total >> 16:
        total = (total >> 16) + (total & 0xFFFF)
    return ~total & 0xFFFF


def build_echo_request(identifier: int, sequence: int) -> bytes:
    """Build a zero-padded echo request of PACKET_SIZE bytes with a valid checksum."""
    header = struct.pack(
        "!BBHHH", ICMP_ECHO, 0, 0, identifier & 0xFFFF, sequence & 0xFFFF
    )
    packet = header + bytes(DATA_SIZE)
    return packet[:2] + struct.pack("!H", checksum(packet)) + packet[4:]


@dataclass(frozen=True)
class IcmpReply:
    """The fields of a received IP datagram that matter to the pinger."""

    ttl: int
    icmp_type: int
    code: int
    source: str
    length: int

    def is_accepted(self, host: str, ip: str) -> bool:
        """Tell whether this packet counts as an answer to our echo request.

        Echo replies always count; an echo request counts too when the target
        was given as a bare address, since the request then loops back to us.
        """
        if self.code != 0:
            return False
        if self.icmp_type == ICMP_ECHOREPLY:
            return True
        return self.icmp_type == ICMP_ECHO and host == ip


def parse_reply(data: bytes) -> IcmpReply:
    """Parse a raw IPv4 datagram carrying an ICMP message."""
    if len(data) < _IP_MIN_HEADER:
        raise ValueError(f"datagram too short for an IP header: {len(data)} bytes")
    header_length = (data[0] & 0x0F) * 4
    if header_length < _IP_MIN_HEADER:
        raise ValueError(f"invalid IP header length: {header_length}")
    if len(data) < header_length + 2:
        raise ValueError("datagram too short for an ICMP header")
    return IcmpReply(
        ttl=data[8],
        icmp_type=data[header_length],
        code=data[header_length + 1],
        source=socket.inet_ntoa(bytes(data[12:16])),
        length=len(data),
    )