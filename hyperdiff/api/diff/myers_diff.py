"""Minimal line edit scripts.

Implements the greedy O((N+M)D) algorithm from Eugene W. Myers, "An O(ND)
Difference Algorithm and Its Variations" (1986). The furthest-reaching point
of every diagonal is kept per edit distance so the path can be walked back.
Moves that would leave the edit grid are never taken, so the walk back can
repeat the forward choice exactly.

Output is deterministic: the common prefix and suffix are matched first, and
inside every changed region all deletions come before all insertions.
"""

from collections.abc import Sequence

from ..repo.LineRecord import LineRecord
from .Delete import Delete
from .EditOp import EditOp, EditScript
from .Equal import Equal
from .Insert import Insert

_EQUAL = 0
_DELETE = 1
_INSERT = 2


def myers_diff(old: Sequence[LineRecord | str], new: Sequence[LineRecord | str]) -> EditScript:
    """Compute a minimal edit script turning ``old`` into ``new``.

    Lines compare equal iff their text is identical.

    Args:
        old: Old lines (LineRecords or plain strings)
        new: New lines (LineRecords or plain strings)

    Returns:
        Ordered Equal/Delete/Insert operations with 0-based half-open ranges
    """
    symbols: dict[str, int] = {}
    a = _intern(old, symbols)
    b = _intern(new, symbols)
    n, m = len(a), len(b)

    if n == 0 and m == 0:
        return ()
    if n == 0:
        return (Insert(range(0, m)),)
    if m == 0:
        return (Delete(range(0, n)),)

    prefix = 0
    limit = min(n, m)
    while prefix < limit and a[prefix] == b[prefix]:
        prefix += 1

    suffix = 0
    limit -= prefix
    while suffix < limit and a[n - 1 - suffix] == b[m - 1 - suffix]:
        suffix += 1

    steps = [_EQUAL] * prefix
    steps.extend(_shortest_edit(a[prefix : n - suffix], b[prefix : m - suffix]))
    steps.extend([_EQUAL] * suffix)
    return _compact(steps)


def _intern(lines: Sequence[LineRecord | str], symbols: dict[str, int]) -> list[int]:
    """Map line texts to small ints so comparisons stay cheap."""
    result = []
    for line in lines:
        text = line.text if isinstance(line, LineRecord) else line
        result.append(symbols.setdefault(text, len(symbols)))
    return result


def _choose(from_left: int, from_above: int, k: int, n: int, m: int) -> tuple[int, bool] | None:
    """Pick the move into diagonal ``k``.

    Args:
        from_left: Furthest x on diagonal k-1 in the previous round (-1 if unreached)
        from_above: Furthest x on diagonal k+1 in the previous round (-1 if unreached)

    Returns:
        (x reached before following the snake, True for an insertion move),
        or None when diagonal ``k`` cannot be reached inside the grid
    """
    down_x = from_above if from_above >= 0 and from_above - k <= m else -1
    right_x = from_left + 1 if 0 <= from_left < n else -1
    if down_x < 0 and right_x < 0:
        return None
    if down_x >= right_x:
        return down_x, True
    return right_x, False


def _shortest_edit(a: list[int], b: list[int]) -> list[int]:
    """Return per-line steps of a shortest edit path from ``a`` to ``b``."""
    n, m = len(a), len(b)
    if n == 0:
        return [_INSERT] * m
    if m == 0:
        return [_DELETE] * n

    max_d = n + m
    offset = max_d + 1
    v = [-1] * (2 * max_d + 3)
    trace: list[list[int]] = []

    for d in range(max_d + 1):
        # Round d only reads diagonals -d-1 .. d+1 of round d-1.
        trace.append(v[offset - d - 1 : offset + d + 2])
        for k in range(-d, d + 1, 2):
            if d == 0:
                x = 0
            else:
                choice = _choose(v[offset + k - 1], v[offset + k + 1], k, n, m)
                if choice is None:
                    v[offset + k] = -1
                    continue
                x = choice[0]
            y = x - k
            while x < n and y < m and a[x] == b[y]:
                x += 1
                y += 1
            v[offset + k] = x
            if x == n and y == m:
                return _backtrack(trace, n, m)

    raise AssertionError("edit path search ended without reaching the end of both sequences")


def _backtrack(trace: list[list[int]], n: int, m: int) -> list[int]:
    steps: list[int] = []
    x, y = n, m
    for d in range(len(trace) - 1, 0, -1):
        snapshot = trace[d]
        k = x - y
        choice = _choose(snapshot[k + d], snapshot[k + d + 2], k, n, m)
        assert choice is not None
        start_x, inserted = choice
        steps.extend([_EQUAL] * (x - start_x))
        if inserted:
            steps.append(_INSERT)
            x, y = start_x, start_x - k - 1
        else:
            steps.append(_DELETE)
            x, y = start_x - 1, start_x - k
    steps.extend([_EQUAL] * x)
    steps.reverse()
    return steps


def _compact(steps: list[int]) -> EditScript:
    """Merge per-line steps into runs, deletions first in each changed region."""
    ops: list[EditOp] = []
    i = j = 0
    pos = 0
    total = len(steps)
    while pos < total:
        if steps[pos] == _EQUAL:
            start = pos
            while pos < total and steps[pos] == _EQUAL:
                pos += 1
            length = pos - start
            ops.append(Equal(range(i, i + length), range(j, j + length)))
            i += length
            j += length
            continue

        deleted = inserted = 0
        while pos < total and steps[pos] != _EQUAL:
            if steps[pos] == _DELETE:
                deleted += 1
            else:
                inserted += 1
            pos += 1
        if deleted:
            ops.append(Delete(range(i, i + deleted)))
            i += deleted
        if inserted:
            ops.append(Insert(range(j, j + inserted)))
            j += inserted
    return tuple(ops)
