"""Colour-coded console logging for the landing page pipeline.

One colour per generation stage so a single run can be followed in a busy
terminal:

    green    extraction, completion
    blue     classification
    magenta  design theme
    yellow   marketing copy, fallbacks
    cyan     image processing
    white    countdown, order form, pipeline
    red      errors
"""

import logging
import time
from contextlib import contextmanager
from typing import Any, Iterator, NamedTuple

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


class PipelineStage:
    EXTRACT = Stage("EXTRACT", GREEN, "🔎")
    CLASSIFY = Stage("CLASSIFY", BLUE, "🏷️")
    DESIGN = Stage("DESIGN", MAGENTA, "🎨")
    CONTENT = Stage("CONTENT", YELLOW, "✍️")
    IMAGES = Stage("IMAGES", CYAN, "🖼️")
    COUNTDOWN = Stage("COUNTDOWN", WHITE, "⏱️")
    FORM = Stage("FORM", WHITE, "📝")
    PIPELINE = Stage("PIPELINE", WHITE, "⚙️")
    ERROR = Stage("ERROR", RED, "❌")
    COMPLETE = Stage("COMPLETE", GREEN, "✅")


def _fields(kwargs: dict[str, Any], color: str = GRAY) -> str:
    if not kwargs:
        return ""
    return f" {color}({' | '.join(f'{k}={v}' for k, v in kwargs.items())}){RESET}"


def _cause(error: Exception | None) -> str:
    return f" {DIM}→ {type(error).__name__}: {error}{RESET}" if error else ""


class PipelineLogger:
    """Wraps a standard logger and renders pipeline events in colour.

    Usage:
        plog = PipelineLogger("LandingPageGenerator")
        with plog.timed_step(PipelineStage.CLASSIFY, "Classifying product"):
            classification = await llm.classify_product(info)
    """

    def __init__(self, component_name: str):
        self._logger = logging.getLogger(component_name)

    def step_start(self, stage: Stage, message: str, **kwargs: Any) -> None:
        self._logger.info(
            f"{stage.color}{BOLD}{stage.icon} [{stage.label}]{RESET} "
            f"{stage.color}{message}{RESET}{_fields(kwargs)}"
        )

    def step_complete(self, stage: Stage, message: str, **kwargs: Any) -> None:
        self._logger.info(
            f"{stage.color}{stage.icon} [{stage.label}]{RESET} "
            f"{GREEN}✓ {message}{RESET}{_fields(kwargs)}"
        )

    def step_warning(self, stage: Stage, message: str, error: Exception | None = None) -> None:
        """A fallback was taken; the run continues."""
        self._logger.warning(
            f"{YELLOW}{stage.icon} [{stage.label}]{RESET} {YELLOW}⚠ {message}{RESET}{_cause(error)}"
        )

    def step_error(self, stage: Stage, message: str, error: Exception | None = None) -> None:
        self._logger.error(
            f"{RED}{BOLD}❌ [{stage.label}]{RESET} {RED}{message}{RESET}{_cause(error)}"
        )

    def detail(self, message: str, **kwargs: Any) -> None:
        self._logger.info(f"   {GRAY}├─ {message}{RESET}{_fields(kwargs, DIM)}")

    def stats(self, **kwargs: Any) -> None:
        parts = " | ".join(f"{k}: {v}" for k, v in kwargs.items())
        self._logger.info(f"   {GRAY}📈 {parts}{RESET}")

    def separator(self, title: str = "") -> None:
        line = f"{'─' * 10} {title} {'─' * max(50 - len(title), 0)}" if title else "─" * 60
        self._logger.info(f"{GRAY}{line}{RESET}")

    @contextmanager
    def timed_step(self, stage: Stage, message: str, **kwargs: Any) -> Iterator[None]:
        """Log start and end of a block with its elapsed time; errors are logged and re-raised."""
        self.step_start(stage, message, **kwargs)
        start = time.perf_counter()
        try:
            yield
        except Exception as e:
            self.step_error(stage, f"{message} failed after {time.perf_counter() - start:.2f}s", error=e)
            raise
        self.step_complete(stage, f"{message} in {time.perf_counter() - start:.2f}s", **kwargs)
