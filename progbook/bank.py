"""A concurrency-safe bank with one account."""

from __future__ import annotations

import threading


class Bank:
    """A single account whose balance is guarded by a lock."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._balance = 0

    def deposit(self, amount: int) -> None:
        with self._lock:
            self._balance += amount

    def balance(self) -> int:
        with self._lock:
            return self._balance