"""Parse host[:port] command-line values."""

from .ConnectionStringBuilder import DEFAULT_PORT


def parse_host(value: str) -> tuple[str, int]:
    """Split 'host' or 'host:port' into a (host, port) pair.

    Raises:
        ValueError: If the port is not an integer.
    """
    host, sep, port = value.rpartition(":")
    if not sep:
        return value, DEFAULT_PORT
    try:
        return host, int(port)
    except ValueError:
        raise ValueError(f"Invalid port in host {value!r} (found: {port!r}, expected: integer)") from None
