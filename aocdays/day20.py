"""Pulses travelling through a network of flip-flops and conjunctions."""

from __future__ import annotations

import argparse
import math
from abc import ABC, abstractmethod
from collections import deque
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from enum import Enum

from aocdays.utils import read_lines, split_string, trim

BUTTON = "button"
BROADCASTER = "broadcaster"
TARGET = "rx"


class Signal(Enum):
    LOW = 0
    HIGH = 1


@dataclass(frozen=True)
class Pulse:
    """A signal sent from one module to another."""

    source: str
    target: str
    signal: Signal = Signal.LOW


class Module(ABC):
    """A node of the network that reacts to pulses sent to it."""

    def __init__(self, connections: Iterable[str]) -> None:
        self.connections = list(connections)

    def _send(self, source: str, signal: Signal) -> list[Pulse]:
        return [Pulse(source, target, signal) for target in self.connections]

    @abstractmethod
    def apply(self, pulse: Pulse) -> list[Pulse]:
        """Handle a received pulse and return the pulses sent in response."""


class FlipFlop(Module):
    """Toggles on every low pulse, sending high when turning on, low when off."""

    def __init__(self, connections: Iterable[str]) -> None:
        super().__init__(connections)
        self.on = False

    def apply(self, pulse: Pulse) -> list[Pulse]:
        if pulse.signal is Signal.HIGH:
            return []
        signal = Signal.LOW if self.on else Signal.HIGH
        self.on = not self.on
        return self._send(pulse.target, signal)


class Conjunction(Module):
    """Sends low only once the latest pulse from every input was high."""

    def __init__(self, connections: Iterable[str]) -> None:
        super().__init__(connections)
        self.last_received: dict[str, Signal] = {}

    def apply(self, pulse: Pulse) -> list[Pulse]:
        self.last_received[pulse.source] = pulse.signal
        all_high = all(value is Signal.HIGH for value in self.last_received.values())
        signal = Signal.LOW if all_high else Signal.HIGH
        return self._send(pulse.target, signal)


class Broadcaster(Module):
    """Passes every pulse on unchanged to all its connections."""

    def apply(self, pulse: Pulse) -> list[Pulse]:
        return self._send(pulse.target, pulse.signal)


def parse_modules(lines: Sequence[str]) -> dict[str, Module]:
    """Build the network from lines such as ``%a -> b, c``."""
    modules: dict[str, Module] = {}
    for line in lines:
        if not line:
            continue
        if "->" not in line:
            raise ValueError(f"Malformed module line: {line!r}")
        head, _, tail = line.partition("->")
        head = trim(head)
        if not head:
            raise ValueError(f"Missing module name: {line!r}")
        connections = [trim(part) for part in split_string(tail, ",") if trim(part)]
        if head[0] == "%":
            modules[head[1:]] = FlipFlop(connections)
        elif head[0] == "&":
            modules[head[1:]] = Conjunction(connections)
        else:
            modules[head] = Broadcaster(connections)

    for name, module in modules.items():
        for target in module.connections:
            receiver = modules.get(target)
            if isinstance(receiver, Conjunction):
                receiver.last_received[name] = Signal.LOW
    return modules


def press_button(modules: Mapping[str, Module]) -> list[Pulse]:
    """Push the button once; return every pulse in the order it was delivered."""
    delivered: list[Pulse] = []
    queue = deque([Pulse(BUTTON, BROADCASTER, Signal.LOW)])
    while queue:
        pulse = queue.popleft()
        delivered.append(pulse)
        module = modules.get(pulse.target)
        if module is not None:
            queue.extend(module.apply(pulse))
    return delivered


def part1(lines: Sequence[str], presses: int = 1000) -> int:
    """Product of low and high pulse counts over ``presses`` button presses."""
    modules = parse_modules(lines)
    low = high = 0
    for _ in range(presses):
        for pulse in press_button(modules):
            if pulse.signal is Signal.LOW:
                low += 1
            else:
                high += 1
    return low * high


def part2(lines: Sequence[str], presses: int = 5000) -> int:
    """Presses needed before ``rx`` receives a low pulse.

    Found as the least common multiple of the first press on which each
    input of the conjunction feeding ``rx`` sends a high pulse.
    """
    modules = parse_modules(lines)
    feeds = [name for name, module in modules.items() if TARGET in module.connections]
    if not feeds:
        raise ValueError(f"No module feeds {TARGET!r}")
    feed = feeds[-1]

    periods: dict[str, int | None] = {
        name: None for name, module in modules.items() if feed in module.connections
    }
    for press in range(presses):
        for pulse in press_button(modules):
            if (
                pulse.signal is Signal.HIGH
                and pulse.source in periods
                and periods[pulse.source] is None
            ):
                periods[pulse.source] = press + 1

    missing = sorted(name for name, period in periods.items() if period is None)
    if missing:
        raise ValueError(f"No high pulse seen within {presses} presses from: {missing}")
    return math.lcm(*(period for period in periods.values() if period is not None))


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Simulate the pulse network.")
    parser.add_argument("input", nargs="?", default="input.txt")
    args = parser.parse_args(argv)
    lines = read_lines(args.input)
    print(part1(lines))
    print(part2(lines))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())