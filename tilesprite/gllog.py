"""Plain-text rendering log, frame-rate counter and shader source loading."""

from __future__ import annotations

import sys
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, TextIO, Union

GL_LOG_FILE = "gl.log"
MAX_SHADER_LENGTH = 262144
FPS_INTERVAL = 0.25


def _format(message: str, args: tuple) -> str:
    return message % args if args else message


class GLLog:
    """An append-only log file, optionally echoed to an error stream."""

    def __init__(
        self,
        path: Union[str, Path] = GL_LOG_FILE,
        stderr: Optional[TextIO] = None,
    ) -> None:
        self.path = Path(path)
        self._stderr = stderr

    @property
    def stderr(self) -> TextIO:
        return self._stderr if self._stderr is not None else sys.stderr

    def restart(self) -> None:
        """Truncate the log and write a header with the local time.

        Raises ``OSError`` when the file cannot be opened for writing.
        """
        try:
            with self.path.open("w", encoding="utf-8") as file:
                file.write(f"GL_LOG_FILE log. local time {time.ctime()}\n\n")
        except OSError:
            self.stderr.write(
                f"ERROR: could not open GL_LOG_FILE log file {self.path} for writing\n"
            )
            raise

    def _append(self, text: str) -> None:
        try:
            with self.path.open("a", encoding="utf-8") as file:
                file.write(text)
        except OSError:
            self.stderr.write(
                f"ERROR: could not open GL_LOG_FILE {self.path} file for appending\n"
            )
            raise

    def log(self, message: str, *args: object) -> None:
        """Append a printf-style formatted message."""
        self._append(_format(message, args))

    def log_err(self, message: str, *args: object) -> None:
        """Append a formatted message and also write it to the error stream."""
        text = _format(message, args)
        self._append(text)
        self.stderr.write(text)


@dataclass
class FpsCounter:
    """Counts frames and reports the frame rate about four times a second."""

    previous_seconds: Optional[float] = None
    frame_count: int = 0

    def tick(self, now: float) -> Optional[str]:
        """Record one frame at time ``now`` (seconds).

        Returns a window title with the current frame rate when more than a
        quarter second has passed since the last report, otherwise ``None``.
        """
        if self.previous_seconds is None:
            self.previous_seconds = now
        title = None
        elapsed = now - self.previous_seconds
        if elapsed > FPS_INTERVAL:
            self.previous_seconds = now
            fps = self.frame_count / elapsed
            title = f"opengl @ fps: {fps:.2f}"
            self.frame_count = 0
        self.frame_count += 1
        return title


def read_shader_source(
    file_name: Union[str, Path],
    max_len: int = MAX_SHADER_LENGTH,
    log: Optional[GLLog] = None,
) -> str:
    """Read a shader file into a string.

    Lengths at or beyond ``max_len`` are reported to the log but the text is
    still returned whole. A file that cannot be opened is logged and the
    ``OSError`` is raised.
    """
    log = log if log is not None else GLLog()
    try:
        with open(file_name, "r", encoding="utf-8") as file:
            lines = file.readlines()
    except OSError:
        log.log_err("ERROR: opening file for reading: %s\n", str(file_name))
        raise
    current_len = 0
    for line in lines:
        current_len += len(line)
        if current_len >= max_len:
            log.log_err(
                "ERROR: shader length is longer than string buffer length %i\n",
                max_len,
            )
    return "".join(lines)