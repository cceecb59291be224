import pytest

from n2m.cli import main
from n2m.report import generate_markdown
from n2m.scan import parse_nmap_file

SAMPLE = """# Nmap 7.94 scan initiated Mon Jan  1 00:00:00 2024 as: nmap -sS 10.0.0.5
Nmap scan report for 10.0.0.5
PORT   STATE SERVICE VERSION
22/tcp open  ssh     OpenSSH 8.9p1
80/tcp open  http

# Nmap done at Mon Jan  1 00:01:00 2024
"""

NO_HOST = """PORT   STATE SERVICE
25/tcp open  smtp
"""


@pytest.fixture
def scan_file(tmp_path):
    path = tmp_path / "scan.nmap"
    path.write_text(SAMPLE)
    return path


@pytest.fixture
def no_host_file(tmp_path):
    path = tmp_path / "scan.nmap"
    path.write_text(NO_HOST)
    return path


def test_no_arguments_prints_usage(capsys):
    assert main([]) == 1
    out = capsys.readouterr().out
    assert out.startswith("Usage: n2m [-o output.md] [-header] <nmap-file1> [nmap-file2] ...")


def test_prints_markdown_to_stdout(scan_file, capsys):
    assert main([str(scan_file)]) == 0
    expected = generate_markdown(False, "10.0.0.5", [parse_nmap_file(scan_file)])
    assert capsys.readouterr().out == expected


def test_writes_output_file(scan_file, tmp_path, capsys):
    target = tmp_path / "out.md"
    assert main(["-o", str(target), str(scan_file)]) == 0
    expected = generate_markdown(False, "10.0.0.5", [parse_nmap_file(scan_file)])
    assert target.read_text(encoding="utf-8") == expected
    assert capsys.readouterr().out == f"Markdown written to {target}\n"


def test_output_flag_with_equals(scan_file, tmp_path):
    target = tmp_path / "eq.md"
    assert main([f"-o={target}", str(scan_file)]) == 0
    assert target.exists()


def test_header_uses_ip_from_file(scan_file, capsys):
    assert main(["-header", str(scan_file)]) == 0
    assert capsys.readouterr().out.startswith("# 10.0.0.5\n\n# nmap\n")


def test_header_false_value_disables_header(scan_file, capsys):
    assert main(["-header=false", str(scan_file)]) == 0
    assert capsys.readouterr().out.startswith("## ")


def test_header_without_ip_uses_unknown(no_host_file, capsys):
    assert main(["--header", str(no_host_file)]) == 0
    captured = capsys.readouterr()
    assert captured.out.startswith("# Unknown\n\n")
    assert "Warning: No IP address found" in captured.err


def test_missing_file_is_skipped(scan_file, tmp_path, capsys):
    missing = tmp_path / "missing.nmap"
    assert main([str(missing), str(scan_file)]) == 0
    captured = capsys.readouterr()
    assert f"Error parsing {missing}" in captured.err
    assert "# 22/tcp (ssh)" in captured.out


def test_all_files_missing_fails(tmp_path, capsys):
    assert main([str(tmp_path / "a.nmap")]) == 1
    assert "No valid nmap scans found" in capsys.readouterr().err


def test_unknown_flag_is_rejected(scan_file, capsys):
    assert main(["-x", str(scan_file)]) == 2
    assert "flag provided but not defined: -x" in capsys.readouterr().err


def test_output_flag_needs_argument(capsys):
    assert main(["-o"]) == 2
    assert "flag needs an argument: -o" in capsys.readouterr().err


def test_help_flag_exits_cleanly(capsys):
    assert main(["-h"]) == 0
    assert "-o string" in capsys.readouterr().err


def test_flags_after_filename_are_files(scan_file, capsys):
    assert main([str(scan_file), "-header"]) == 0
    captured = capsys.readouterr()
    assert "Error parsing -header" in captured.err
    assert not captured.out.startswith("# 10.0.0.5")


def test_double_dash_ends_flags(scan_file, capsys):
    assert main(["--", str(scan_file)]) == 0
    assert "# 80/tcp (http)" in capsys.readouterr().out