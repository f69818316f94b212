# ftping

A small ICMP echo client for IPv4. It sends one echo request per second to a
host, prints a line for each answer with the sequence number, TTL and
round-trip time, and prints a statistics summary when interrupted with Ctrl+C.

## Installation

```
pip install .
```

## Usage

Sending raw ICMP packets needs root privileges or the `CAP_NET_RAW`
capability:

```
sudo ftping example.com
```

The output looks like this:

```
PING example.com (192.0.2.10): 56 data bytes
64 bytes from 192.0.2.10: icmp_seq=0 ttl=56 time=10.000 ms
64 bytes from 192.0.2.10: icmp_seq=1 ttl=56 time=12.000 ms
^C--- example.com ping statistics ---
2 packets transmitted, 2 packets received, 0% packet loss
round-trip min/avg/max/stddev = 10.000/11.000/12.000/1.000 ms
```

A packet that arrives but is not an echo reply is reported as
`Destination Host Unreachable` and counted as lost; a request that gets no
answer within one second is counted as lost as well. The round-trip line of
the summary appears only when at least one reply was received.

Exit status and errors:

- no host argument: `Usage: ftping [hostname]` on standard error, status 1;
- a host that cannot be resolved: `ping: unknow host`, status 1;
- the raw socket cannot be opened: `socket: <reason>`, status 1;
- interrupted with Ctrl+C: the summary is printed, status 0.

## What it does not do

The command takes exactly one host and no options: there is no packet count,
no interval, TTL or packet-size setting, no IPv6 and no quiet mode. It runs
until interrupted.

## Library use

- `ftping.icmp`: `checksum`, `build_echo_request` (a 64-byte echo request
  with a valid checksum), `parse_reply` (reads TTL, ICMP type and code and the
  source address from a raw IPv4 datagram) and the `IcmpReply` record with
  `is_accepted`.
- `ftping.stats`: `PingStats`, with `record_sent`, `record_reply`,
  `record_lost`, `packet_loss`, `average`, `stddev` and `summary`.
- `ftping.ping`: `resolve`, `format_reply`, `format_unreachable`,
  `PingError`, `Pinger` (a context manager around the socket, with `send`,
  `receive`, `run` and `close`) and `main`.

```python
from ftping.icmp import build_echo_request, checksum
from ftping.stats import PingStats

packet = build_echo_request(identifier=1234, sequence=1)
assert len(packet) == 64
assert checksum(packet) == 0

stats = PingStats()
stats.record_sent()
stats.record_reply(10.0)
print(stats.summary("example.com"), end="")
```

The package also carries small helper modules:

- `ftping.chars`: ASCII classification and case conversion (`isalpha`,
  `isdigit`, `isalnum`, `isascii`, `isprint`, `toupper`, `tolower`).
- `ftping.memory`: byte-buffer operations (`memset`, `bzero`, `memcpy`,
  `memmove`, `memchr`, `memcmp`, `calloc`).
- `ftping.strings`: string helpers (`strlen`, `strlcpy`, `strlcat`, `strchr`,
  `strrchr`, `strncmp`, `strnstr`, `atoi`, `itoa`, `strdup`, `substr`,
  `strjoin`, `strtrim`, `split`, `strmapi`, `striteri`, `tab_len`).
- `ftping.output`: writing to file descriptors (`putchar_fd`, `putstr_fd`,
  `putendl_fd`, `putnbr_fd`, `putnbr_base_fd`, `addr_len`).
- `ftping.linkedlist`: `Node` and `LinkedList`, a singly linked list with
  `add_front`, `add_back`, `last`, `clear`, `iterate` and `map`.
- `ftping.printf`: `format_text` and `printf_fd`, supporting `%c %s %d %i %u
  %T %p %x %X %%`, with `FormatError` for bad formats or missing arguments.

## Running the tests

```
pip install .[test]
pytest
```