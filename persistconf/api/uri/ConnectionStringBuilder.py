"""MongoDB connection string builder."""

from dataclasses import dataclass, field, replace
from urllib.parse import quote

from ..config.ConfigError import NoHostError

DEFAULT_PROTOCOL = "mongodb"
DEFAULT_PORT = 27017
DEFAULT_DATABASE = "ziwei"

# Characters encodeURIComponent leaves untouched besides alphanumerics
_COMPONENT_SAFE = "-_.!~*'()"


def encode_component(value: object) -> str:
    """Percent-encode a URI component the way drivers expect (encodeURIComponent rules)."""
    if isinstance(value, bool):
        value = "true" if value else "false"
    return quote(str(value), safe=_COMPONENT_SAFE)


@dataclass(frozen=True)
class ConnectionParameters:
    """Snapshot of everything a connection string is assembled from."""

    protocol: str = DEFAULT_PROTOCOL
    credentials: tuple[str, str] | None = None
    hosts: tuple[tuple[str, int], ...] = ()
    database: str = DEFAULT_DATABASE
    options: tuple[tuple[str, object], ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class ConnectionStringBuilder:
    """Immutable fluent builder; every step returns a new builder.

    Example:
        >>> ConnectionStringBuilder().add_host("a", 1).set_database("d").build()
        'mongodb://a:1/d'
    """

    parameters: ConnectionParameters = field(default_factory=ConnectionParameters)

    def reset(self) -> "ConnectionStringBuilder":
        return ConnectionStringBuilder()

    def set_protocol(self, protocol: str) -> "ConnectionStringBuilder":
        return self._with(protocol=protocol)

    def set_credentials(self, user: str | None, password: str | None) -> "ConnectionStringBuilder":
        """Store user and password together.

        The credential block is only emitted when both are non-empty; a lone
        user or password is dropped from the built string.
        """
        return self._with(credentials=(user or "", password or ""))

    def add_host(self, host: str, port: int = DEFAULT_PORT) -> "ConnectionStringBuilder":
        return self._with(hosts=(*self.parameters.hosts, (host, port)))

    def set_database(self, database: str) -> "ConnectionStringBuilder":
        return self._with(database=database)

    def add_option(self, key: str, value: object) -> "ConnectionStringBuilder":
        # dict keeps the first insertion position of an overwritten key
        options = dict(self.parameters.options)
        options[key] = value
        return self._with(options=tuple(options.items()))

    def build(self) -> str:
        """Assemble `protocol://[user:password@]host:port,.../database[?k=v&...]`.

        Raises:
            NoHostError: If no host was added.
        """
        params = self.parameters
        if not params.hosts:
            raise NoHostError()

        parts = [f"{params.protocol}://"]
        if params.credentials and all(params.credentials):
            user, password = params.credentials
            parts.append(f"{encode_component(user)}:{encode_component(password)}@")
        parts.append(",".join(f"{host}:{port}" for host, port in params.hosts))
        parts.append(f"/{params.database}")
        if params.options:
            parts.append("?" + "&".join(f"{key}={encode_component(value)}" for key, value in params.options))
        return "".join(parts)

    def _with(self, **changes: object) -> "ConnectionStringBuilder":
        return ConnectionStringBuilder(replace(self.parameters, **changes))  # type: ignore[arg-type]
