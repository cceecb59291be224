"""Turn parsed nmap scans into a Markdown notes document."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence

from n2m.scan import NmapScan, Port

_LEADING_INT_RE = re.compile(r"[+-]?[0-9]+")

NOTES_PLACEHOLDER = "Manual investigation notes for this port go here"


def _port_number(number: str) -> int:
    match = _LEADING_INT_RE.match(number.lstrip())
    return int(match.group(0)) if match else 0


def merge_ports(scans: Iterable[NmapScan]) -> list[Port]:
    """Collect open ports from all scans, one per number and protocol, sorted.

    When a port appears more than once, the first entry that carries
    version information is kept.
    """
    merged: dict[str, Port] = {}
    for scan in scans:
        for port in scan.ports:
            key = f"{port.number}/{port.protocol}"
            existing = merged.get(key)
            if existing is None or (not existing.version and port.version):
                merged[key] = port
    return sorted(
        merged.values(), key=lambda port: (_port_number(port.number), port.protocol)
    )


def display_service(service: str) -> str:
    """Service name as shown in a port heading."""
    if not service:
        return "unknown"
    if service == "tcpwrapped":
        return service
    if "?" in service:
        return service.removesuffix("?")
    return service


def generate_markdown(include_header: bool, ip: str, scans: Sequence[NmapScan]) -> str:
    """Render the scans and a section for every open port as Markdown."""
    parts: list[str] = []

    if include_header:
        parts.append(f"# {ip}\n\n")
        parts.append("# nmap\n")

    for scan in scans:
        parts.append(f"## {scan.scan_type}\n\n")
        if scan.command:
            parts.append(f"```bash\n{scan.command}\n```\n\n")
        parts.append(f"```\n{scan.output}\n```\n\n")

    for port in merge_ports(scans):
        service = display_service(port.service)
        parts.append(f"# {port.number}/{port.protocol.lower()} ({service})\n")
        if port.version:
            parts.append(f"**Version:** {port.version}\n\n")
        parts.append(f"{NOTES_PLACEHOLDER}\n\n")

    return "".join(parts)