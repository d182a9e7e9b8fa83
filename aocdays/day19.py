"""Sorting machine parts through chains of workflow rules."""

from __future__ import annotations

import argparse
from collections import deque
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field, replace
from enum import Enum

from aocdays.utils import read_lines, split_string

CATEGORIES = ("x", "m", "a", "s")

Part = dict[str, int]


class Operation(Enum):
    LESS = "<"
    MORE = ">"
    LAST = ""


@dataclass(frozen=True)
class Interval:
    """The half-open range of ratings [lower, upper)."""

    lower: int = 1
    upper: int = 4001

    def cut(self, op: Operation, threshold: int) -> Interval:
        """Keep values below ``threshold`` for LESS, otherwise those from it up."""
        if op is Operation.LESS:
            return replace(self, upper=max(self.lower, min(threshold, self.upper)))
        return replace(self, lower=min(self.upper, max(threshold, self.lower)))

    def is_empty(self) -> bool:
        return self.lower >= self.upper

    def size(self) -> int:
        return self.upper - self.lower


def _full_intervals() -> dict[str, Interval]:
    return {category: Interval() for category in CATEGORIES}


@dataclass(frozen=True)
class PartRange:
    """Every part whose ratings lie in one interval per category."""

    intervals: dict[str, Interval] = field(default_factory=_full_intervals)

    def _with(self, category: str, interval: Interval) -> PartRange:
        return PartRange({**self.intervals, category: interval})

    def is_empty(self) -> bool:
        return any(interval.is_empty() for interval in self.intervals.values())

    def size(self) -> int:
        total = 1
        for interval in self.intervals.values():
            total *= interval.size()
        return total


@dataclass(frozen=True)
class Rule:
    """A workflow step: a condition on one category, or an unconditional jump."""

    target: str
    op: Operation = Operation.LAST
    category: str = "x"
    threshold: int = 0

    @classmethod
    def parse(cls, text: str) -> Rule:
        """Parse ``a<2006:qkq`` style conditions or a bare target name."""
        if len(text) > 1 and text[1] in "<>":
            category = text[0]
            if category not in CATEGORIES:
                raise ValueError(f"Invalid category: {category!r}")
            pieces = split_string(text[2:], ":")
            if len(pieces) != 2:
                raise ValueError(f"Malformed rule: {text!r}")
            return cls(
                target=pieces[1],
                op=Operation(text[1]),
                category=category,
                threshold=int(pieces[0]),
            )
        return cls(target=text)

    def matches(self, part: Mapping[str, int]) -> bool:
        if self.op is Operation.LAST:
            return True
        value = part[self.category]
        if self.op is Operation.LESS:
            return value < self.threshold
        return value > self.threshold

    def split(self, part_range: PartRange) -> tuple[PartRange, PartRange]:
        """Split a range into the parts this rule accepts and those it passes on."""
        if self.op is Operation.LAST:
            return part_range, part_range
        interval = part_range.intervals[self.category]
        if self.op is Operation.LESS:
            accepted = interval.cut(Operation.LESS, self.threshold)
            rejected = interval.cut(Operation.MORE, self.threshold)
        else:
            accepted = interval.cut(Operation.MORE, self.threshold + 1)
            rejected = interval.cut(Operation.LESS, self.threshold + 1)
        return (
            part_range._with(self.category, accepted),
            part_range._with(self.category, rejected),
        )


def parse_part(text: str) -> Part:
    """Parse ``{x=787,m=2655,a=1222,s=2876}`` into category ratings."""
    part: Part = {}
    for piece in split_string(text.strip("{}"), ","):
        category = piece[0]
        if category not in CATEGORIES:
            raise ValueError(f"Invalid category: {category!r}")
        part[category] = int(piece[2:])
    return part


def parse_workflows(lines: Sequence[str]) -> dict[str, list[Rule]]:
    """Read workflows up to the first blank line."""
    workflows: dict[str, list[Rule]] = {}
    for line in lines:
        if not line:
            break
        pieces = split_string(line, "{")
        if len(pieces) != 2:
            raise ValueError(f"Malformed workflow: {line!r}")
        name, body = pieces
        workflows[name] = [Rule.parse(rule) for rule in split_string(body[:-1], ",")]
    return workflows


def _accepts(workflows: Mapping[str, list[Rule]], part: Part) -> bool:
    name = "in"
    while name not in ("A", "R"):
        rules = workflows.get(name)
        if rules is None:
            raise ValueError(f"Unknown workflow: {name!r}")
        rule = next((rule for rule in rules if rule.matches(part)), None)
        if rule is None:
            raise ValueError(f"No rule of {name!r} applies")
        name = rule.target
    return name == "A"


def part1(lines: Sequence[str]) -> int:
    """Sum of all ratings of the accepted parts."""
    lines = list(lines)
    workflows = parse_workflows(lines)
    blank = lines.index("") if "" in lines else len(lines)
    parts = [parse_part(line) for line in lines[blank + 1 :] if line]
    return sum(sum(part.values()) for part in parts if _accepts(workflows, part))


def part2(lines: Sequence[str]) -> int:
    """Number of rating combinations, each from 1 to 4000, that are accepted."""
    workflows = parse_workflows(lines)
    total = 0
    queue: deque[tuple[PartRange, str, int]] = deque([(PartRange(), "in", 0)])

    def route(part_range: PartRange, target: str) -> None:
        nonlocal total
        if target == "A":
            total += part_range.size()
        elif target != "R":
            queue.append((part_range, target, 0))

    while queue:
        part_range, name, index = queue.popleft()
        rules = workflows.get(name)
        if rules is None:
            raise ValueError(f"Unknown workflow: {name!r}")
        if index >= len(rules):
            raise ValueError(f"No rule of {name!r} applies")
        rule = rules[index]

        if rule.op is Operation.LAST:
            route(part_range, rule.target)
            continue

        accepted, rejected = rule.split(part_range)
        if not accepted.is_empty():
            route(accepted, rule.target)
        if not rejected.is_empty():
            queue.append((rejected, name, index + 1))

    return total


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Sort machine parts.")
    parser.add_argument("input", nargs="?", default="input.txt")
    args = parser.parse_args(argv)
    lines = read_lines(args.input)
    print(part1(lines))
    print(part2(lines))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())