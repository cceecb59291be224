"""Convert nmap normal-format scan output into Markdown notes."""

__version__ = "0.1.0"
__all__ = ["cli", "report", "scan", "scantype"]