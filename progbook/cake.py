"""A simulation of a concurrent cake shop with tunable stages."""

from __future__ import annotations

import queue
import random
import sys
import threading
import time
from dataclasses import dataclass, field
from typing import TextIO

_DONE = None


def _work(duration: float, stddev: float) -> None:
    """Block for a period normally distributed around duration."""
    delay = duration + random.gauss(0.0, 1.0) * stddev
    time.sleep(max(delay, 0.0))


@dataclass
class Shop:
    """Shop parameters; all times are in seconds."""

    verbose: bool = False
    cakes: int = 0
    bake_time: float = 0.0
    bake_stddev: float = 0.0
    bake_buf: int = 0
    num_icers: int = 0
    ice_time: float = 0.0
    ice_stddev: float = 0.0
    ice_buf: int = 0
    inscribe_time: float = 0.0
    inscribe_stddev: float = 0.0
    out: TextIO | None = None
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    def _say(self, action: str, cake: int) -> None:
        if self.verbose:
            with self._lock:
                print(action, cake, file=self.out if self.out is not None else sys.stdout)

    def _baker(self, baked: queue.Queue) -> None:
        for cake in range(self.cakes):
            self._say("baking", cake)
            _work(self.bake_time, self.bake_stddev)
            baked.put(cake)
        for _ in range(self.num_icers):
            baked.put(_DONE)

    def _icer(self, iced: queue.Queue, baked: queue.Queue) -> None:
        while (cake := baked.get()) is not _DONE:
            self._say("icing", cake)
            _work(self.ice_time, self.ice_stddev)
            iced.put(cake)

    def _inscriber(self, iced: queue.Queue) -> list[int]:
        finished = []
        for _ in range(self.cakes):
            cake = iced.get()
            self._say("inscribing", cake)
            _work(self.inscribe_time, self.inscribe_stddev)
            self._say("finished", cake)
            finished.append(cake)
        return finished

    def work(self, runs: int = 1) -> list[int]:
        """Run the simulation runs times; return cake numbers in finishing order."""
        finished: list[int] = []
        for _ in range(runs):
            # A queue cannot rendezvous, so an unbuffered stage gets one slot.
            baked: queue.Queue = queue.Queue(maxsize=max(self.bake_buf, 1))
            iced: queue.Queue = queue.Queue(maxsize=max(self.ice_buf, 1))
            workers = [threading.Thread(target=self._baker, args=(baked,), daemon=True)]
            workers.extend(
                threading.Thread(target=self._icer, args=(iced, baked), daemon=True)
                for _ in range(self.num_icers)
            )
            for worker in workers:
                worker.start()
            finished.extend(self._inscriber(iced))
            for worker in workers:
                worker.join()
        return finished