"""
Carousel interaction engine.

Owns the slide index, the autoplay loop and the interaction flags of one
carousel instance. Autoplay is a single one-shot timer that is cancelled and
re-armed by ``_schedule()`` after every change to the index, the playing
flag or the interacting flag, so at most one tick is ever pending.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from functools import partial
from typing import Callable, List, Optional, Sequence

from arkfolio.application.carousel.events import KeyEvent, TouchEvent
from arkfolio.application.ports import SchedulerPort, TimerHandle
from arkfolio.domain.entities.slide import Slide
from arkfolio.domain.value_objects.direction import Direction
from arkfolio.infra.config.logging_config import get_logger

DEFAULT_AUTOPLAY_INTERVAL_MS = 5000
SWIPE_THRESHOLD = 50


@dataclass(frozen=True)
class CarouselState:
    current_index: int
    total_slides: int
    is_playing: bool
    is_interacting: bool
    direction: Direction


StateListener = Callable[[CarouselState], None]


class CarouselEngine:
    def __init__(
        self,
        slides: Sequence[Slide],
        scheduler: SchedulerPort,
        autoplay_interval: int = DEFAULT_AUTOPLAY_INTERVAL_MS,
        pause_on_interaction: bool = True,
        initial_index: int = 0,
    ):
        if autoplay_interval < 0:
            raise ValueError("Autoplay interval cannot be negative")
        self._slides: List[Slide] = list(slides)
        if self._slides and not 0 <= initial_index < len(self._slides):
            raise ValueError(
                f"Initial index {initial_index} outside 0..{len(self._slides) - 1}"
            )

        self._scheduler = scheduler
        self.autoplay_interval = autoplay_interval
        self.pause_on_interaction = pause_on_interaction

        self._state = CarouselState(
            current_index=initial_index if self._slides else 0,
            total_slides=len(self._slides),
            is_playing=autoplay_interval > 0,
            is_interacting=False,
            direction=Direction.RIGHT,
        )
        self._touch_start_x: Optional[float] = None
        self._timer: Optional[TimerHandle] = None
        self._timer_generation = 0
        self._deadline: Optional[float] = None
        self._listeners: List[StateListener] = []
        self._closed = False
        self._log = get_logger("carousel.engine")

        self._schedule()

    # ------------------------------------------------------------------
    # Read side
    # ------------------------------------------------------------------
    @property
    def state(self) -> CarouselState:
        return self._state

    @property
    def current_index(self) -> int:
        return self._state.current_index

    @property
    def total_slides(self) -> int:
        return self._state.total_slides

    @property
    def is_playing(self) -> bool:
        return self._state.is_playing

    @property
    def is_interacting(self) -> bool:
        return self._state.is_interacting

    @property
    def direction(self) -> Direction:
        return self._state.direction

    @property
    def current_slide(self) -> Optional[Slide]:
        if not self._slides:
            return None
        return self._slides[self._state.current_index]

    @property
    def scheduled_deadline(self) -> Optional[float]:
        """Scheduler-clock time (ms) of the pending autoplay tick, if any."""
        return self._deadline

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Call ``listener`` with the new state after every change."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------
    def go_to_slide(self, index: int) -> None:
        if index < 0 or index >= self.total_slides:
            return
        self._update(
            direction=Direction.between(self._state.current_index, index),
            current_index=index,
        )

    def go_to_next(self) -> None:
        if not self.total_slides:
            return
        self._update(
            direction=Direction.RIGHT,
            current_index=(self._state.current_index + 1) % self.total_slides,
        )

    def go_to_prev(self) -> None:
        if not self.total_slides:
            return
        self._update(
            direction=Direction.LEFT,
            current_index=(self._state.current_index - 1) % self.total_slides,
        )

    # ------------------------------------------------------------------
    # Playback
    # ------------------------------------------------------------------
    def toggle_play(self) -> None:
        self._update(is_playing=not self._state.is_playing)

    def pause(self) -> None:
        self._cancel_timer()
        self._update(is_playing=False)

    def resume(self) -> None:
        self._update(is_playing=True)

    # ------------------------------------------------------------------
    # Input handlers
    # ------------------------------------------------------------------
    def handle_key_down(self, event: KeyEvent) -> None:
        actions = {
            "ArrowLeft": self.go_to_prev,
            "ArrowRight": self.go_to_next,
            " ": self.toggle_play,
            "Escape": self.pause,
        }
        action = actions.get(event.key)
        if action is None:
            return
        event.prevent_default()
        action()

    def handle_touch_start(self, event: TouchEvent) -> None:
        self._touch_start_x = event.touches[0].client_x if event.touches else None
        self._set_interacting(True)

    def handle_touch_end(self, event: TouchEvent) -> None:
        if self._touch_start_x is not None and event.changed_touches:
            diff = self._touch_start_x - event.changed_touches[0].client_x
            if abs(diff) > SWIPE_THRESHOLD:
                # Finger moved left: reveal the next slide
                if diff > 0:
                    self.go_to_next()
                else:
                    self.go_to_prev()
        self._touch_start_x = None
        self._set_interacting(False)

    def handle_mouse_enter(self) -> None:
        self._set_interacting(True)

    def handle_mouse_leave(self) -> None:
        self._set_interacting(False)

    def handle_focus(self) -> None:
        self._set_interacting(True)

    def handle_blur(self) -> None:
        self._set_interacting(False)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def update_slides(self, slides: Sequence[Slide]) -> None:
        """Swap in a new slide list, resetting the index if it fell out of range."""
        self._slides = list(slides)
        index = self._state.current_index
        if index >= len(self._slides):
            index = 0
        self._update(total_slides=len(self._slides), current_index=index)

    def close(self) -> None:
        self._closed = True
        self._cancel_timer()
        self._listeners.clear()

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------
    def _set_interacting(self, value: bool) -> None:
        if self.pause_on_interaction:
            self._update(is_interacting=value)

    def _should_autoplay(self) -> bool:
        s = self._state
        return (
            not self._closed
            and s.is_playing
            and self.autoplay_interval > 0
            and not s.is_interacting
            and s.total_slides > 0
        )

    def _update(self, **changes) -> None:
        previous = self._state
        new_state = replace(previous, **changes)
        if new_state == previous:
            return
        self._state = new_state

        if (
            new_state.current_index != previous.current_index
            or new_state.is_playing != previous.is_playing
            or new_state.is_interacting != previous.is_interacting
            or new_state.total_slides != previous.total_slides
        ):
            self._schedule()

        for listener in list(self._listeners):
            listener(new_state)

    def _schedule(self) -> None:
        self._cancel_timer()
        if not self._should_autoplay():
            return
        self._timer_generation += 1
        self._deadline = self._scheduler.now_ms() + self.autoplay_interval
        self._timer = self._scheduler.call_later(
            self.autoplay_interval, partial(self._on_tick, self._timer_generation)
        )

    def _cancel_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
        self._timer = None
        self._deadline = None

    def _on_tick(self, generation: int) -> None:
        if generation != self._timer_generation or not self._should_autoplay():
            self._log.debug("carousel.autoplay.stale", generation=generation)
            return
        self._timer = None
        self._deadline = None
        next_index = (self._state.current_index + 1) % self.total_slides
        self._log.debug("carousel.autoplay.tick", index=next_index)
        self._update(direction=Direction.RIGHT, current_index=next_index)
        if self._timer is None:
            # Single-slide carousels do not change state; keep the loop alive
            self._schedule()
