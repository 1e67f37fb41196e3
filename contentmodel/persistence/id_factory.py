# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro


class IncrementingIdFactory:
    """Hands out increasing integer ids, one counter per namespace.

    Warning: not thread-safe. Callers serialise access, as with the entities themselves.
    """

    def __init__(self, first_id: int = 1) -> None:
        if first_id < 1:
            msg = f"first_id must be >= 1, got {first_id}"
            raise ValueError(msg)
        self.first_id = first_id
        self.counters: dict[str, int] = {}

    def next(self, namespace: str, /, *, increment: bool = True) -> int:
        counter = self.counters.get(namespace, self.first_id)
        if increment:
            self.counters[namespace] = counter + 1
        return counter

    def reset(self) -> None:
        self.counters.clear()
