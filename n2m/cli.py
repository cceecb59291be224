"""Command line entry point: convert nmap output files into Markdown notes."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from n2m.report import generate_markdown
from n2m.scan import NmapScan, extract_ip_from_file, parse_nmap_file

PROG = "n2m"

_USAGE = (
    "Usage: n2m [-o output.md] [-header] <nmap-file1> [nmap-file2] ...\n"
    "\nExample:\n"
    "  n2m all-tcp.nmap\n"
    "  n2m -o 10.10.11.174.md all-tcp.nmap top-1000-tcp-script-scan.nmap udp-1000.nmap\n"
    "  n2m -header -o results.md *.nmap\n"
)

_FLAG_DEFAULTS = (
    f"Usage of {PROG}:\n"
    "  -header\n"
    "    \tprepend a top-level header with the host's IP address (default: false)\n"
    "  -o string\n"
    "    \toutput markdown file (optional)\n"
)

_TRUE = {"1", "t", "T", "TRUE", "true", "True"}
_FALSE = {"0", "f", "F", "FALSE", "false", "False"}


class _FlagError(Exception):
    """The command line options could not be parsed."""


class _HelpRequested(Exception):
    """The user asked for the option summary."""


def _parse_args(argv: Sequence[str]) -> tuple[str, bool, list[str]]:
    output_file = ""
    include_header = False
    args = list(argv)
    i = 0
    while i < len(args):
        arg = args[i]
        if len(arg) < 2 or not arg.startswith("-"):
            break
        dashes = 1
        if arg[1] == "-":
            dashes = 2
            if len(arg) == 2:
                i += 1
                break
        name = arg[dashes:]
        if not name or name[0] in "-=":
            raise _FlagError(f"bad flag syntax: {arg}")
        i += 1

        name, has_value, value = name.partition("=")
        if name == "header":
            if not has_value:
                include_header = True
            elif value in _TRUE:
                include_header = True
            elif value in _FALSE:
                include_header = False
            else:
                raise _FlagError(f'invalid boolean value "{value}" for -{name}: parse error')
        elif name == "o":
            if not has_value:
                if i >= len(args):
                    raise _FlagError(f"flag needs an argument: -{name}")
                value = args[i]
                i += 1
            output_file = value
        elif name in ("h", "help"):
            raise _HelpRequested
        else:
            raise _FlagError(f"flag provided but not defined: -{name}")
    return output_file, include_header, args[i:]


def main(argv: Sequence[str] | None = None) -> int:
    """Run the converter and return the process exit status."""
    if argv is None:
        argv = sys.argv[1:]

    try:
        output_file, include_header, filenames = _parse_args(argv)
    except _HelpRequested:
        sys.stderr.write(_FLAG_DEFAULTS)
        return 0
    except _FlagError as exc:
        print(exc, file=sys.stderr)
        sys.stderr.write(_FLAG_DEFAULTS)
        return 2

    if not filenames:
        sys.stdout.write(_USAGE)
        return 1

    scans: list[NmapScan] = []
    ip = ""
    for filename in filenames:
        try:
            scan = parse_nmap_file(filename)
        except (OSError, ValueError) as exc:
            print(f"Error parsing {filename}: {exc}", file=sys.stderr)
            continue
        scans.append(scan)
        if not ip:
            ip = extract_ip_from_file(filename)

    if not scans:
        print("No valid nmap scans found", file=sys.stderr)
        return 1

    if not ip and include_header:
        print(
            "Warning: No IP address found in nmap files, using 'Unknown' in header",
            file=sys.stderr,
        )
        ip = "Unknown"

    markdown = generate_markdown(include_header, ip, scans)

    if output_file:
        try:
            with open(output_file, "w", encoding="utf-8", newline="") as handle:
                handle.write(markdown)
        except OSError as exc:
            print(f"Error writing to file: {exc}", file=sys.stderr)
            return 1
        print(f"Markdown written to {output_file}")
    else:
        sys.stdout.write(markdown)
    return 0


if __name__ == "__main__":
    sys.exit(main())