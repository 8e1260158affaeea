"""Connection string assembly."""

from .ConnectionStringBuilder import ConnectionParameters, ConnectionStringBuilder, encode_component

__all__ = ["ConnectionParameters", "ConnectionStringBuilder", "encode_component"]
