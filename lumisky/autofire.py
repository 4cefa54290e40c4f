"""
Ambient auto-fire ("the show").

Driven by the frame loop's millisecond clock rather than an OS timer: each
update() checks the pending deadline, fires one ambient launch when it has
passed and draws a fresh random interval. Disabling or cancelling drops the
deadline, after which update() never launches again until re-enabled.
"""
import logging
import random
from typing import Callable, Optional

from . import config as C
from .presets import vary_for_autofire

logger = logging.getLogger("lumisky")


class AutoFire:
    def __init__(
        self,
        engine,
        rng: random.Random | None = None,
        min_ms: int = C.AUTOFIRE_MIN_MS,
        max_ms: int = C.AUTOFIRE_MAX_MS,
        make_config: Optional[Callable] = None,
    ):
        self.engine = engine
        self.rng = rng or random.Random()
        self.min_ms = min_ms
        self.max_ms = max_ms
        self.make_config = make_config or vary_for_autofire
        self.next_fire_ms: Optional[float] = None
        self.fired = 0

    @property
    def enabled(self) -> bool:
        return self.next_fire_ms is not None

    def _interval(self) -> float:
        return self.rng.uniform(self.min_ms, self.max_ms)

    def set_enabled(self, enabled: bool, now_ms: float) -> None:
        if enabled == self.enabled:
            return
        if enabled:
            self.next_fire_ms = now_ms + self._interval()
            logger.info("Auto-fire started")
        else:
            self.cancel()

    def toggle(self, now_ms: float) -> bool:
        self.set_enabled(not self.enabled, now_ms)
        return self.enabled

    def cancel(self) -> None:
        if self.next_fire_ms is not None:
            logger.info(f"Auto-fire stopped after {self.fired} launches")
        self.next_fire_ms = None

    def update(self, now_ms: float) -> bool:
        """Launch once if the deadline has passed; a stalled loop does not replay missed shots."""
        if self.next_fire_ms is None or now_ms < self.next_fire_ms:
            return False
        config = self.make_config(self.rng)
        self.engine.launch(config)
        self.fired += 1
        self.next_fire_ms = now_ms + self._interval()
        logger.debug(f"Auto-fire launch #{self.fired}: {config.name or config.shape.value}")
        return True
