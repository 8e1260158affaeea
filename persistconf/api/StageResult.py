"""StageResult dataclass for the announce/progress/result/output command pattern."""

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field


@dataclass
class StageResult:
    """What a cmd_* function hands back to the CLI.

    The CLI prints ``announce``, drains ``progress_callback`` (which fills in
    ``result``, ``output`` and ``success``), then renders ``output``.
    Every output dict carries ``errors`` and ``warnings`` lists.
    """

    announce: str
    progress_callback: Callable[["StageResult"], Iterator[tuple[float, str]]]
    result: str = ""
    output: dict = field(default_factory=dict)
    success: bool = False

    @property
    def errors(self) -> list[str]:
        return list(self.output.get("errors", []))

    @property
    def warnings(self) -> list[str]:
        return list(self.output.get("warnings", []))
