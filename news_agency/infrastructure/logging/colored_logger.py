"""Colored tracing of article store operations.

Every store call is wrapped in ``OperationLogger.timed_step`` which writes a
start line, then either a completion line with the elapsed time or a red
failure line. Stage colors:

    green    connect, schema, seed
    blue     reads and search
    cyan     inserts
    yellow   updates
    magenta  deletes
    red      failures
"""

import logging
import time
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any, NamedTuple


class Colors:
    """ANSI escape codes, shared with the console formatter."""

    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"
    RED = "\033[91m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    BLUE = "\033[94m"
    MAGENTA = "\033[95m"
    CYAN = "\033[96m"
    WHITE = "\033[97m"
    GRAY = "\033[90m"


class Stage(NamedTuple):
    label: str
    color: str
    icon: str


class StoreStage:
    """The stages a store operation can be logged under."""

    CONNECT = Stage("CONNECT", Colors.GREEN, "🔌")
    SCHEMA = Stage("SCHEMA", Colors.GREEN, "🗄️")
    SEED = Stage("SEED", Colors.GREEN, "🌱")
    CREATE = Stage("CREATE", Colors.CYAN, "✏️")
    READ = Stage("READ", Colors.BLUE, "📄")
    SEARCH = Stage("SEARCH", Colors.BLUE, "🔎")
    UPDATE = Stage("UPDATE", Colors.YELLOW, "📝")
    DELETE = Stage("DELETE", Colors.MAGENTA, "🗑️")
    STATS = Stage("STATS", Colors.WHITE, "📊")


def _with_details(text: str, details: dict[str, Any]) -> str:
    if not details:
        return text
    joined = ", ".join(f"{key}={value}" for key, value in details.items())
    return f"{text} {Colors.GRAY}({joined}){Colors.RESET}"


class OperationLogger:
    """Stage-colored logger for one component.

    Start and completion lines are written at ``level`` (DEBUG unless the
    component asks for more); failures always go out at ERROR.
    """

    def __init__(self, component_name: str, level: int = logging.DEBUG):
        self._logger = logging.getLogger(component_name)
        self._level = level

    def _enabled(self) -> bool:
        return self._logger.isEnabledFor(self._level)

    def step_start(self, stage: Stage, message: str, **details: Any) -> None:
        if self._enabled():
            line = f"{stage.color}{Colors.BOLD}{stage.icon} [{stage.label}]{Colors.RESET} {stage.color}{message}{Colors.RESET}"
            self._logger.log(self._level, _with_details(line, details))

    def step_complete(self, stage: Stage, message: str, elapsed: float, **details: Any) -> None:
        if self._enabled():
            line = (
                f"{stage.color}{stage.icon} [{stage.label}]{Colors.RESET} "
                f"{Colors.GREEN}✓ {message}{Colors.RESET} {Colors.GRAY}{elapsed:.3f}s{Colors.RESET}"
            )
            self._logger.log(self._level, _with_details(line, details))

    def step_error(self, stage: Stage, message: str, error: BaseException, elapsed: float) -> None:
        self._logger.error(
            "%s❌ [%s] %s failed after %.3fs%s %s%s: %s%s",
            Colors.RED, stage.label, message, elapsed, Colors.RESET,
            Colors.DIM, type(error).__name__, error, Colors.RESET,
        )

    def detail(self, message: str, **details: Any) -> None:
        if self._enabled():
            self._logger.log(self._level, _with_details(f"   {Colors.GRAY}└ {message}{Colors.RESET}", details))

    @contextmanager
    def timed_step(self, stage: Stage, message: str, **details: Any) -> Iterator[None]:
        """Log ``message`` around the block, with its duration or its failure."""
        self.step_start(stage, message, **details)
        start = time.perf_counter()
        try:
            yield
        except Exception as exc:
            self.step_error(stage, message, exc, time.perf_counter() - start)
            raise
        self.step_complete(stage, message, time.perf_counter() - start, **details)
