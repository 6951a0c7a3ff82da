# pixel_dither/session.py
from __future__ import annotations

"""
Latest-request-wins wrapper around process().

A PreviewSession owns the current Config and the decoded source. Every change
bumps a generation counter; a run remembers the generation it started with and
polls it between stages and diffusion rows, so a run overtaken by a newer
change stops early and yields None instead of a stale image.

  session = PreviewSession(rgb, Config.from_raw(pixel_size=16))
  session.update(method="ordered", strength=0.5)
  result = session.run()            # or session.submit(executor)
"""

import threading
from concurrent.futures import Executor, Future
from typing import Any, Optional

from .core_types import ProcessResult, U8Image
from .errors import RunCancelled
from .pipeline import Config, process
from .utils import debug_log


class PreviewSession:
    def __init__(
        self,
        source: Optional[U8Image] = None,
        config: Optional[Config] = None,
        *,
        debug: bool = False,
    ) -> None:
        self._lock = threading.Lock()
        self._source = source
        self._config = config if config is not None else Config()
        self._generation = 0
        self._debug = debug
        self.latest: Optional[ProcessResult] = None

    @property
    def generation(self) -> int:
        with self._lock:
            return self._generation

    @property
    def config(self) -> Config:
        with self._lock:
            return self._config

    @property
    def source(self) -> Optional[U8Image]:
        with self._lock:
            return self._source

    def is_current(self, generation: int) -> bool:
        with self._lock:
            return generation == self._generation

    def update(self, **changes: Any) -> int:
        """
        Apply Config field changes and return the new generation.
        Values are clamped through Config.from_raw; an unknown method raises
        InvalidInput and leaves the session untouched.
        """
        with self._lock:
            current = self._config
            fields = {
                "pixel_size": current.pixel_size,
                "method": current.method,
                "strength": current.strength,
                "threshold": current.threshold,
                "palette": current.palette,
            }
            fields.update(changes)
            self._config = Config.from_raw(**fields)
            self._generation += 1
            return self._generation

    def set_source(self, source: Optional[U8Image]) -> int:
        """Swap the decoded source image and return the new generation."""
        with self._lock:
            self._source = source
            self._generation += 1
            return self._generation

    def run(self) -> Optional[ProcessResult]:
        """
        Process the current settings.
        Returns None when there is no source yet or the run was superseded.
        """
        with self._lock:
            generation = self._generation
            source = self._source
            config = self._config
        if source is None:
            return None

        try:
            result = process(
                source,
                config,
                should_cancel=lambda: not self.is_current(generation),
                debug=self._debug,
            )
        except RunCancelled as exc:
            if self._debug:
                debug_log(f"generation {generation} dropped: {exc}")
            return None

        with self._lock:
            if generation != self._generation:
                return None
            self.latest = result
        return result

    def submit(self, executor: Executor) -> "Future[Optional[ProcessResult]]":
        """Schedule run() on an executor; stale runs resolve to None."""
        return executor.submit(self.run)


__all__ = ["PreviewSession"]
