"""Describe an nmap scan in words, based on the command line that ran it."""

from __future__ import annotations

import re
import string

# Whitespace as nmap command lines use it; deliberately excludes vertical tab.
_WS = r"[ \t\n\f\r]"

_TOP_PORTS_RE = re.compile(rf"--top-ports{_WS}+([0-9]+)")
_PORT_SPEC_RE = re.compile(rf"-p{_WS}*([^ \t\n\f\r]+)")

# TCP scan techniques selected by a letter after -s, in reporting order.
_TCP_TECHNIQUES: tuple[tuple[str, str], ...] = (
    ("S", "SYN"),
    ("T", "Connect"),
    ("A", "ACK"),
    ("N", "Null"),
    ("F", "FIN"),
    ("X", "Xmas"),
    ("W", "Window"),
    ("M", "Maimon"),
)

# Non-TCP protocols selected by a letter after -s, in reporting order.
_OTHER_PROTOCOLS: tuple[tuple[str, str], ...] = (
    ("Y", "SCTP"),
    ("Z", "SCTP Cookie Echo"),
    ("O", "IP Protocol"),
)

_OS = "OS Detection"
_VERSION = "Version Detection"
_SCRIPT = "Script Scan"


def parse_scan_flags(command: str) -> frozenset[str]:
    """Return every ASCII letter that directly follows an occurrence of ``-s``."""
    flags: set[str] = set()
    start = 0
    # An "-s" occupying the last two characters carries no letters.
    limit = len(command) - 2
    while True:
        i = command.find("-s", start)
        if i < 0 or i >= limit:
            break
        j = i + 2
        while j < len(command) and command[j] in string.ascii_letters:
            flags.add(command[j])
            j += 1
        start = i + 1
    return frozenset(flags)


def has_standalone_flag(command: str, flag: str) -> bool:
    """Tell whether ``flag`` appears as a separate option in ``command``."""
    if f"{flag} " in command or command.endswith(flag):
        return True
    return re.search(re.escape(flag) + rf"{_WS}+-", command) is not None


def get_port_range(command: str) -> str:
    """Describe which ports the command scans."""
    if "-p-" in command:
        return "All Ports"

    if "--top-ports" in command:
        match = _TOP_PORTS_RE.search(command)
        if match:
            return f"Top {match.group(1)}"

    if has_standalone_flag(command, "-F"):
        return "Top 100"

    if " -p" in command:
        match = _PORT_SPEC_RE.search(command)
        if match:
            ports = match.group(1)
            if "-" in ports or "," in ports:
                return "Custom Ports"
            return f"Port {ports}"
        return "Custom Ports"

    return "Top 1000"


def _protocols(flags: frozenset[str], has_tcp_technique: bool) -> list[str]:
    protocols: list[str] = []
    if "U" in flags:
        protocols.append("UDP")
        if has_tcp_technique:
            protocols.append("TCP")
    elif has_tcp_technique:
        protocols.append("TCP")

    protocols.extend(name for letter, name in _OTHER_PROTOCOLS if letter in flags)

    if not protocols and ("V" in flags or "C" in flags):
        protocols.append("TCP")
    return protocols


def _features(command: str, flags: frozenset[str]) -> list[str]:
    features: list[str] = []
    if "C" in flags:
        features.append(_SCRIPT)
    if "V" in flags:
        features.append(_VERSION)

    aggressive = has_standalone_flag(command, "-A")
    if has_standalone_flag(command, "-O") or aggressive:
        features.append(_OS)
    if aggressive:
        if "C" not in flags:
            features.append(_SCRIPT)
        if "V" not in flags:
            features.append(_VERSION)
    return features


def determine_scan_type(command: str) -> str:
    """Return a short human-readable description of an nmap command line."""
    flags = parse_scan_flags(command)
    techniques = [name for letter, name in _TCP_TECHNIQUES if letter in flags]
    protocols = _protocols(flags, bool(techniques))
    port_range = get_port_range(command)
    features = _features(command, flags)

    technique_str = "/".join(techniques)
    if protocols:
        parts = [
            f"TCP ({technique_str})" if protocol == "TCP" and techniques else protocol
            for protocol in protocols
        ]
        result = [f"{' + '.join(parts)} {port_range}"]
    elif techniques:
        result = [f"TCP ({technique_str}) {port_range}"]
    else:
        result = [f"TCP {port_range}"]

    if _OS in features and _VERSION in features:
        result.extend(f for f in features if f not in (_OS, _VERSION))
        result.append("OS + Version Detection")
    else:
        result.extend(features)

    return ", ".join(result)