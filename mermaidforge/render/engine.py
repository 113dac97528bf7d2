# mermaidforge/render/engine.py
"""Layout engines: Mermaid source text -> rows of glyphs.

The transform only ever talks to a LayoutEngine. The default implementation
drives the `mermaid-ascii` executable; anything else with a matching
`layout()` method (a library binding, a remote service, a test double) can be
passed in its place.
"""
from __future__ import annotations

import logging
import os
import shutil
import subprocess
import tempfile
from dataclasses import dataclass
from typing import List, NamedTuple, Optional, Protocol

from ..utils.text import max_line_width

logger = logging.getLogger(__name__)

DEFAULT_EXECUTABLE = "mermaid-ascii"
ENV_EXECUTABLE = "MERMAIDFORGE_ENGINE"
ENV_TIMEOUT = "MERMAIDFORGE_TIMEOUT"


class LayoutResult(NamedTuple):
    """Result of a layout attempt: exactly one of `text` / `error` is set."""
    text: Optional[str] = None
    error: Optional[str] = None


class LayoutEngine(Protocol):
    def layout(self, source: str, *, use_ascii: bool, max_width: int) -> LayoutResult:
        """Lay out `source`. A `max_width` of 0 or less means unbounded."""
        ...


@dataclass
class EngineConfig:
    """Settings for the mermaid-ascii executable."""

    executable: str = DEFAULT_EXECUTABLE
    padding_x: int = 5
    padding_y: int = 5
    border_padding: int = 1
    timeout: float = 30.0

    @classmethod
    def from_env(cls) -> "EngineConfig":
        """Build a config from MERMAIDFORGE_ENGINE / MERMAIDFORGE_TIMEOUT.

        Only the command line calls this; library callers pass a config.
        """
        config = cls()
        executable = os.environ.get(ENV_EXECUTABLE, "").strip()
        if executable:
            config.executable = executable
        timeout = os.environ.get(ENV_TIMEOUT, "").strip()
        if timeout:
            try:
                config.timeout = float(timeout)
            except ValueError:
                logger.warning("Ignoring %s=%r: not a number", ENV_TIMEOUT, timeout)
        return config


def _first_line(text: str) -> str:
    for line in text.splitlines():
        if line.strip():
            return line.strip()
    return ""


class MermaidAsciiCLI:
    """LayoutEngine backed by the `mermaid-ascii` command line tool.

    mermaid-ascii has no width option, so the width budget is met by laying
    the diagram out again with less horizontal padding between nodes until
    it fits. If even the tightest layout is too wide, that is reported as a
    failure rather than returning an over-wide diagram.
    """

    def __init__(self, config: Optional[EngineConfig] = None):
        self.config = config or EngineConfig()

    def _find_executable(self) -> Optional[str]:
        return shutil.which(self.config.executable)

    def _padding_candidates(self, max_width: int) -> List[int]:
        start = max(self.config.padding_x, 1)
        if max_width <= 0:
            return [start]
        return list(range(start, 0, -1))

    def _command(self, executable: str, path: str, use_ascii: bool, padding_x: int) -> List[str]:
        cmd = [
            executable,
            "-f", path,
            "-x", str(padding_x),
            "-y", str(self.config.padding_y),
            "-p", str(self.config.border_padding),
        ]
        if use_ascii:
            cmd.append("--ascii")
        return cmd

    def _run(self, cmd: List[str]) -> LayoutResult:
        try:
            proc = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
                timeout=self.config.timeout,
            )
        except subprocess.TimeoutExpired:
            logger.debug("%s timed out", cmd[0])
            return LayoutResult(error=f"layout timed out after {self.config.timeout:g}s")
        except OSError as e:
            logger.debug("%s execution error: %s", cmd[0], e)
            return LayoutResult(error=f"could not run {cmd[0]}: {e}")

        if proc.returncode != 0:
            logger.debug("%s failed (%d): %s", cmd[0], proc.returncode, proc.stderr)
            message = _first_line(proc.stderr) or _first_line(proc.stdout)
            return LayoutResult(error=message or f"{cmd[0]} exited with status {proc.returncode}")
        if not proc.stdout.strip():
            return LayoutResult(error=f"{cmd[0]} produced no output")
        return LayoutResult(text=proc.stdout)

    def layout(self, source: str, *, use_ascii: bool, max_width: int) -> LayoutResult:
        executable = self._find_executable()
        if executable is None:
            return LayoutResult(error=f"{self.config.executable} not found on PATH")

        try:
            with tempfile.TemporaryDirectory(prefix="mermaidforge_") as tmpdir:
                input_path = os.path.join(tmpdir, "diagram.mmd")
                # Lone surrogates in the source are written as "?" rather than failing the write.
                with open(input_path, "w", encoding="utf-8", errors="replace") as f:
                    f.write(source)

                widest = 0
                for padding_x in self._padding_candidates(max_width):
                    result = self._run(self._command(executable, input_path, use_ascii, padding_x))
                    if result.error is not None:
                        return result
                    widest = max_line_width(result.text.rstrip())
                    if max_width <= 0 or widest <= max_width:
                        return result
                    logger.debug("layout is %d columns at padding %d, budget %d", widest, padding_x, max_width)
        except OSError as e:
            logger.debug("could not stage diagram source: %s", e)
            return LayoutResult(error=f"could not write diagram source: {e}")

        return LayoutResult(error=f"diagram needs {widest} columns but only {max_width} are available")
