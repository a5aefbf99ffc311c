from __future__ import annotations

from hyphae.errors import StructuralError

GROW = "M"
PUSH = "["
POP = "]"


def max_depth(sentence: str) -> int:
    """Return the longest run of ``M`` along any single root-to-tip path.

    Entering a branch keeps the running count; leaving it subtracts whatever
    the branch added, so siblings never extend each other.

    Raises:
        StructuralError: if a ``]`` has no open branch or a ``[`` is never closed.
    """

    longest = 0
    running = 0
    frames = [0]
    for index, symbol in enumerate(sentence):
        if symbol == GROW:
            running += 1
            frames[-1] += 1
            longest = max(longest, running)
        elif symbol == PUSH:
            frames.append(0)
        elif symbol == POP:
            if len(frames) == 1:
                raise StructuralError(
                    f"unmatched ']' at index {index}", index=index
                )
            running -= frames.pop()
    if len(frames) != 1:
        raise StructuralError(
            f"{len(frames) - 1} unclosed '[' at end of sentence", index=len(sentence)
        )
    return longest
