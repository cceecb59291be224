# n2m

`n2m` reads one or more nmap normal-output files (the `.nmap` files written
by `nmap -oN` or `-oA`) and produces a Markdown document for your notes:

* a section per scan, titled with a readable description of the scan type
  (for example `TCP (SYN) All Ports` or `UDP Top 100, Version Detection`),
  holding the command that was run and the full scan output;
* a heading per open port, merged across every scan and sorted by port
  number, then protocol, with the detected version where nmap found one and
  room for your own notes.

## Installation

```bash
pip install .
```

To run the tests:

```bash
pip install ".[test]"
pytest
```

## Usage

```bash
n2m [-o output.md] [-header] <nmap-file1> [nmap-file2] ...
```

Options:

* `-o FILE` writes the Markdown to `FILE` instead of standard output and
  prints `Markdown written to FILE`.
* `-header` puts a top-level heading with the scanned host before the scans,
  followed by a `# nmap` heading. The host is taken from the first readable
  file that names one: its first `Nmap scan report for` line (the IPv4
  address if one is given, otherwise the host name), or else an IPv4 address
  in the file's name. If none is found, `Unknown` is used and a warning is
  printed on standard error. `-header=true` and `-header=false` are also
  accepted.
* `-h` or `-help` prints a summary of the options.

Examples:

```bash
n2m all-tcp.nmap
n2m -o 10.10.11.174.md all-tcp.nmap top-1000-tcp-script-scan.nmap udp-1000.nmap
n2m -header -o results.md *.nmap
```

Exit status: 0 on success, 1 when no file was given, when no file could be
read, or when the output file cannot be written, and 2 for an unknown or
malformed option. Files that cannot be read (including files with a line of
64 KiB or more) are reported on standard error and skipped.

## Output

For a service scan of one host, the result looks like this:

````markdown
## TCP Top 1000, Script Scan, Version Detection

```bash
nmap -sCV -oN top-1000.nmap 10.0.0.5
```

```
# Nmap 7.94 scan initiated ... as: nmap -sCV -oN top-1000.nmap 10.0.0.5
...
```

# 22/tcp (ssh)
**Version:** OpenSSH 8.9p1 Ubuntu 3ubuntu0.1

Manual investigation notes for this port go here
````

Only ports in the `open` state are listed. When the same port and protocol
appear in several scans, the first entry that carries version information is
kept. Service names nmap marks as uncertain (`http?`) are shown without the
question mark, and ports with no service name are shown as `unknown`.

## Library use

The pieces are also usable from Python:

```python
from n2m.scan import parse_nmap_file, parse_nmap_text, extract_ip
from n2m.report import generate_markdown, merge_ports
from n2m.scantype import determine_scan_type

scan = parse_nmap_file("all-tcp.nmap")
print(scan.scan_type, scan.command)
for port in scan.ports:
    print(port.number, port.protocol, port.service, port.version)

print(generate_markdown(True, "10.0.0.5", [scan]))

print(determine_scan_type("nmap -sS -p- 10.0.0.5"))  # TCP (SYN) All Ports
```

* `n2m.scan` holds the `NmapScan` and `Port` dataclasses, `parse_nmap_text`
  and `parse_nmap_file` for reading output, and `extract_ip` /
  `extract_ip_from_file` for finding the scanned host.
* `n2m.report` holds `merge_ports`, `display_service` and
  `generate_markdown`.
* `n2m.scantype` holds `determine_scan_type`, `get_port_range`,
  `parse_scan_flags` and `has_standalone_flag`, which describe a scan from
  its command line alone.

## What it does not do

`n2m` does not run nmap; it only reads output that already exists. It
understands the normal (`-oN`) format only, not the XML or grepable formats,
and it writes one document for one host: when a file covers several hosts,
their open ports are all merged into the same list.