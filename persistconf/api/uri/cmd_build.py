"""Build a connection string command."""

from collections.abc import Iterator

from ..config.ConfigError import ConfigError
from ..StageResult import StageResult
from .ConnectionStringBuilder import DEFAULT_DATABASE, DEFAULT_PROTOCOL, ConnectionStringBuilder
from .parse_host import parse_host


def cmd_build(
    hosts: list[str] | None = None,
    database: str = DEFAULT_DATABASE,
    user: str = "",
    password: str = "",
    options: list[str] | None = None,
    protocol: str = DEFAULT_PROTOCOL,
) -> StageResult:
    """Assemble a MongoDB connection string.

    Args:
        hosts: 'host' or 'host:port' values, in order.
        database: Database name.
        user: Username (only used together with password).
        password: Password (only used together with user).
        options: 'key=value' query options, in order.
        protocol: URI scheme, e.g. 'mongodb+srv'.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.5, "Assembling connection string...")
        try:
            builder = ConnectionStringBuilder().set_protocol(protocol).set_database(database)
            if user or password:
                builder = builder.set_credentials(user, password)
            for value in hosts or []:
                builder = builder.add_host(*parse_host(value))
            for option in options or []:
                key, sep, option_value = option.partition("=")
                if not sep:
                    raise ValueError(f"Invalid option {option!r} (expected: key=value)")
                builder = builder.add_option(key, option_value)
            uri = builder.build()
        except (ConfigError, ValueError) as e:
            yield (1.0, "Complete")
            result_obj.result = "Could not build connection string"
            result_obj.output = {"errors": [str(e)], "warnings": [], "uri": ""}
            result_obj.success = False
            return

        warnings: list[str] = []
        if bool(user) != bool(password):
            warnings.append("Credentials ignored: user and password must both be given")

        yield (1.0, "Complete")
        result_obj.result = "Built connection string"
        result_obj.output = {"errors": [], "warnings": warnings, "uri": uri}
        result_obj.success = True

    return StageResult(announce="Building connection string...", progress_callback=do_work)
