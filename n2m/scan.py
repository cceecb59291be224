"""Read nmap normal-format output and pull out the command, open ports and host."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from os import PathLike
from typing import Union

from n2m.scantype import determine_scan_type

StrPath = Union[str, "PathLike[str]"]

# Whitespace in the sense of the patterns below; vertical tab is not included.
_WS = "[ \t\n\f\r]"
_NON_WS = "[^ \t\n\f\r]"

_PORT_RE = re.compile(
    rf"([0-9]+)/(tcp|udp){_WS}+(\w+){_WS}+({_NON_WS}+)(?:{_WS}+(.*))?",
    re.ASCII,
)
_COMMAND_RE = re.compile(r"# Nmap .* scan initiated .* as: (.*)")
_REPORT_IP_RE = re.compile(
    r"Nmap scan report for (?:.*?\()?([0-9]+\.[0-9]+\.[0-9]+\.[0-9]+)\)?"
)
_REPORT_HOST_RE = re.compile(rf"Nmap scan report for ({_NON_WS}+)")
_BARE_IP_RE = re.compile(r"([0-9]+\.[0-9]+\.[0-9]+\.[0-9]+)")

_PORT_SECTION_END = ("Service Info:", "Host script results:", "# Nmap done")

# Lines at least this many bytes long (terminator excluded) cannot be read.
_MAX_LINE = 64 * 1024


class LineTooLongError(ValueError):
    """A line of the input is longer than the reader accepts."""


@dataclass
class Port:
    """One port line from the PORT table of a scan."""

    number: str
    protocol: str
    state: str
    service: str
    version: str = ""


@dataclass
class NmapScan:
    """A single nmap run: how it was started, what it printed, which ports were open."""

    scan_type: str = ""
    command: str = ""
    output: str = ""
    ports: list[Port] = field(default_factory=list)


def _split_lines(text: str) -> list[str]:
    if not text:
        return []
    parts = text.split("\n")
    if parts[-1] == "":
        parts.pop()
    return [part[:-1] if part.endswith("\r") else part for part in parts]


def _decode_lines(data: bytes) -> Iterator[str]:
    if not data:
        return
    parts = data.split(b"\n")
    if parts[-1] == b"":
        parts.pop()
    for raw in parts:
        if len(raw) >= _MAX_LINE:
            raise LineTooLongError("token too long")
        if raw.endswith(b"\r"):
            raw = raw[:-1]
        yield raw.decode("utf-8", errors="replace")


def _parse_port(line: str) -> Port | None:
    match = _PORT_RE.fullmatch(line)
    if match is None:
        return None
    number, protocol, state, service, version = match.groups()
    return Port(
        number=number,
        protocol=protocol.upper(),
        state=state,
        service=service.strip(),
        version=(version or "").strip(),
    )


def _parse_lines(lines: Iterable[str]) -> NmapScan:
    scan = NmapScan()
    seen: list[str] = []
    in_port_section = False

    for line in lines:
        seen.append(line)

        command = _COMMAND_RE.search(line)
        if command:
            scan.command = command.group(1)

        if line.startswith("PORT") and "STATE" in line:
            in_port_section = True
            continue

        if in_port_section and (line == "" or line.startswith(_PORT_SECTION_END)):
            in_port_section = False

        if in_port_section:
            port = _parse_port(line)
            if port is not None and port.state == "open":
                scan.ports.append(port)

    scan.output = "".join(f"{line}\n" for line in seen).strip()
    if scan.command:
        scan.scan_type = determine_scan_type(scan.command)
    return scan


def parse_nmap_text(text: str) -> NmapScan:
    """Parse the text of one nmap normal-format output file."""
    return _parse_lines(_split_lines(text))


def parse_nmap_file(path: StrPath) -> NmapScan:
    """Parse an nmap output file; raises OSError or ValueError if it cannot be read."""
    with open(path, "rb") as handle:
        data = handle.read()
    return _parse_lines(_decode_lines(data))


def _find_ip(lines: Iterable[str], filename: str) -> str:
    for line in lines:
        match = _REPORT_IP_RE.search(line)
        if match:
            return match.group(1)
        match = _REPORT_HOST_RE.search(line)
        if match:
            return match.group(1)

    match = _BARE_IP_RE.search(filename)
    return match.group(1) if match else ""


def extract_ip(text: str, filename: str = "") -> str:
    """Find the scanned host in the output, falling back to an address in the filename."""
    return _find_ip(_split_lines(text), filename)


def _readable_prefix(lines: Iterator[str]) -> Iterator[str]:
    try:
        yield from lines
    except LineTooLongError:
        return


def extract_ip_from_file(path: StrPath) -> str:
    """Like extract_ip, reading the file; an unreadable file gives an empty string."""
    try:
        with open(path, "rb") as handle:
            data = handle.read()
    except OSError:
        return ""
    return _find_ip(_readable_prefix(_decode_lines(data)), str(path))