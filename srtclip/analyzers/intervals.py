"""Parse user interval specs such as ``"7,9; 10,15"``."""

import re

from srtclip.models import Interval

_NUMBER_RE = re.compile(r"-?\d+", re.ASCII)


class IntervalFormatError(ValueError):
    """Raised when a group does not contain exactly two numbers."""

    def __init__(self, group: str, position: int):
        self.group = group
        self.position = position
        super().__init__(
            f'Group {position} ("{group}") does not contain exactly two numbers'
        )


def _numbers(group: str) -> list[int]:
    numbers: list[int] = []
    for token in group.split(","):
        token = token.strip()
        if _NUMBER_RE.fullmatch(token):
            numbers.append(int(token))
    return numbers


def resolve_intervals(raw: str) -> list[Interval]:
    """Resolve every ``;``-separated group into an Interval.

    All-or-nothing: the first malformed group raises IntervalFormatError and
    no intervals are returned.
    """
    groups = [g.strip() for g in raw.split(";")] if ";" in raw else [raw.strip()]

    intervals: list[Interval] = []
    for position, group in enumerate(groups, 1):
        nums = _numbers(group)
        if len(nums) != 2:
            raise IntervalFormatError(group, position)
        intervals.append(Interval(start_index=nums[0], end_index=nums[1]))
    return intervals
