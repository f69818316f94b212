"""ICMP echo client with round-trip statistics, plus small string, memory, list and formatting helpers."""

__version__ = "0.1.0"