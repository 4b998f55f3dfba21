"""
frame_loop.py: Per-frame callback scheduling and the cancellable game loop.
"""

from typing import Callable, Dict, Optional

from .data_models import GameSnapshot, InputAction
from .game_engine import GameEngine


class FrameScheduler:
    """
    Queues callbacks for the next display refresh.
    The host calls run_frame() once per refresh.
    """

    def __init__(self):
        self._next_id = 0
        self._pending: Dict[int, Callable[[], None]] = {}

    @property
    def pending(self) -> int:
        return len(self._pending)

    def request_frame(self, callback: Callable[[], None]) -> int:
        self._next_id += 1
        self._pending[self._next_id] = callback
        return self._next_id

    def cancel_frame(self, frame_id: int):
        self._pending.pop(frame_id, None)

    def run_frame(self) -> int:
        """Runs callbacks queued before this call; later requests wait a frame."""
        due, self._pending = self._pending, {}
        for callback in due.values():
            callback()
        return len(due)


class GameLoop:
    """
    One iteration per frame: advance the engine, render, reschedule.
    At most one iteration is ever pending.
    """

    def __init__(self, engine: GameEngine, scheduler: FrameScheduler,
                 render: Callable[[GameSnapshot], None]):
        self.engine = engine
        self.scheduler = scheduler
        self.render = render
        self.frame_id: Optional[int] = None

    def _cancel_pending(self):
        if self.frame_id is not None:
            self.scheduler.cancel_frame(self.frame_id)
            self.frame_id = None

    def _schedule(self):
        self.frame_id = self.scheduler.request_frame(self._iteration)

    def _iteration(self):
        self.frame_id = None
        self.engine.step()
        self.render(self.engine.snapshot())
        self._schedule()

    def start(self):
        """Starts rendering without starting a run."""
        self._cancel_pending()
        self._schedule()

    def restart(self):
        self._cancel_pending()
        self.engine.start()
        self._schedule()

    def stop(self):
        self._cancel_pending()

    def handle_input(self) -> InputAction:
        if self.engine.state.is_game_over:
            self.restart()
            return InputAction.RESTART
        self.engine.jump()
        return InputAction.JUMP
