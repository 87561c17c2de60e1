"""Word-level edit distance and alignment path."""
from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

AlignmentOp = Tuple[str, Optional[int], Optional[int]]


def _distance_table(ref: Sequence[str], hyp: Sequence[str]) -> List[List[int]]:
    n, m = len(ref), len(hyp)
    dp = [[0] * (m + 1) for _ in range(n + 1)]
    for i in range(1, n + 1):
        dp[i][0] = i
    for j in range(1, m + 1):
        dp[0][j] = j

    for i in range(1, n + 1):
        for j in range(1, m + 1):
            cost = 0 if ref[i - 1] == hyp[j - 1] else 1
            dp[i][j] = min(
                dp[i - 1][j] + 1,
                dp[i][j - 1] + 1,
                dp[i - 1][j - 1] + cost,
            )
    return dp


def edit_distance(ref: Sequence[str], hyp: Sequence[str]) -> int:
    """Minimum number of insertions, deletions and substitutions (unit cost)
    turning ``hyp`` into ``ref``. Tokens are compared by exact equality.

    Keeps two rows of the table, so memory grows with ``len(hyp)`` only.
    """
    prev = list(range(len(hyp) + 1))
    for i in range(1, len(ref) + 1):
        curr = [i] + [0] * len(hyp)
        for j in range(1, len(hyp) + 1):
            cost = 0 if ref[i - 1] == hyp[j - 1] else 1
            curr[j] = min(
                prev[j] + 1,
                curr[j - 1] + 1,
                prev[j - 1] + cost,
            )
        prev = curr
    return prev[len(hyp)]


def align_sequences(ref: Sequence[str], hyp: Sequence[str]) -> List[AlignmentOp]:
    """Walk the full distance table back from the corner to recover one
    cheapest path.

    Each step is ``(op, ref_index, hyp_index)``: "match" and "sub" consume a
    token from both sides, "del" a reference token the speaker skipped,
    "ins" a recognized token with no reference counterpart (index None on
    the side that was not consumed). Diagonal steps are preferred on ties.

    The number of non-"match" operations equals ``edit_distance(ref, hyp)``.
    """
    dp = _distance_table(ref, hyp)

    ops: List[AlignmentOp] = []
    i, j = len(ref), len(hyp)
    while i > 0 or j > 0:
        if i > 0 and j > 0:
            cost = 0 if ref[i - 1] == hyp[j - 1] else 1
            if dp[i][j] == dp[i - 1][j - 1] + cost:
                ops.append(("match" if cost == 0 else "sub", i - 1, j - 1))
                i -= 1
                j -= 1
                continue
        if i > 0 and dp[i][j] == dp[i - 1][j] + 1:
            ops.append(("del", i - 1, None))
            i -= 1
        else:
            ops.append(("ins", None, j - 1))
            j -= 1
    ops.reverse()
    return ops
