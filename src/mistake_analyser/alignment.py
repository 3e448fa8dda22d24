from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Sequence

from .models import AlignmentOp, OpKind


class Step(Enum):
    """Backtrace choice recorded for one cell of the alignment matrix."""

    STOP = "S"
    EQUAL = "E"
    REPLACE = "R"
    DELETE = "D"
    INSERT = "I"


@dataclass(slots=True)
class AlignmentMatrix:
    """Cost and backtrace tables for two token sequences, sized (n + 1) x (m + 1)."""

    source: Sequence[str]
    target: Sequence[str]
    cost: List[List[int]]
    steps: List[List[Step]]

    @property
    def distance(self) -> int:
        return self.cost[len(self.source)][len(self.target)]


def build_alignment_matrix(
    source: Sequence[str], target: Sequence[str]
) -> AlignmentMatrix:
    """
    Forward Wagner-Fischer pass over tokens.

    Ties prefer match/substitute, then delete, then insert.
    """
    n = len(source)
    m = len(target)
    cost = [[0] * (m + 1) for _ in range(n + 1)]
    steps = [[Step.STOP] * (m + 1) for _ in range(n + 1)]

    for i in range(1, n + 1):
        cost[i][0] = i
        steps[i][0] = Step.DELETE
    for j in range(1, m + 1):
        cost[0][j] = j
        steps[0][j] = Step.INSERT

    for i in range(1, n + 1):
        for j in range(1, m + 1):
            same = source[i - 1] == target[j - 1]
            delete = cost[i - 1][j] + 1
            insert = cost[i][j - 1] + 1
            substitute = cost[i - 1][j - 1] + (0 if same else 1)
            best = min(delete, insert, substitute)
            cost[i][j] = best
            if substitute == best:
                steps[i][j] = Step.EQUAL if same else Step.REPLACE
            elif delete == best:
                steps[i][j] = Step.DELETE
            else:
                steps[i][j] = Step.INSERT

    return AlignmentMatrix(source=source, target=target, cost=cost, steps=steps)


def backtrace(matrix: AlignmentMatrix) -> List[AlignmentOp]:
    """Walk recorded steps from (n, m) back to the origin and return ops left to right."""
    source = matrix.source
    target = matrix.target
    ops: List[AlignmentOp] = []
    i = len(source)
    j = len(target)

    while i > 0 or j > 0:
        step = matrix.steps[i][j]
        if step is Step.EQUAL or step is Step.REPLACE:
            kind = OpKind.EQUAL if step is Step.EQUAL else OpKind.REPLACE
            ops.append(AlignmentOp(kind, source[i - 1], target[j - 1], i - 1, j - 1))
            i -= 1
            j -= 1
        elif step is Step.DELETE:
            ops.append(AlignmentOp(OpKind.DELETE, source[i - 1], None, i - 1, j))
            i -= 1
        elif step is Step.INSERT:
            ops.append(AlignmentOp(OpKind.INSERT, None, target[j - 1], i, j - 1))
            j -= 1
        else:
            break

    ops.reverse()
    return ops


def align_tokens(source: Sequence[str], target: Sequence[str]) -> List[AlignmentOp]:
    """Return a minimum-cost edit script turning ``source`` tokens into ``target``."""
    return backtrace(build_alignment_matrix(source, target))
