from dataclasses import dataclass, field
from enum import Enum
from typing import List, Dict, Tuple, Optional, Any, Callable, Iterable, Iterator
import pandas as pd
import json
from pathlib import Path

PLACEHOLDER = 0

Stack = Tuple[int, ...]


class Operation(Enum):
    PA = "pa"
    PB = "pb"
    SA = "sa"
    SB = "sb"
    SS = "ss"
    RA = "ra"
    RB = "rb"
    RR = "rr"
    RRA = "rra"
    RRB = "rrb"
    RRR = "rrr"

    @property
    def inverse(self) -> 'Operation':
        return REVERSE_OPERATIONS[self]

    def is_meaningful(self, state: 'State') -> bool:
        return IS_MEANINGFUL[self](state)


@dataclass(frozen=True)
class State:
    """
    A pair of stacks plus a back-reference to the state it was reached from.

    Equality and hashing only look at the stack contents, so two states reached by
    different paths are the same search node.  The operation path is not stored as a
    list; it is rebuilt from the ``parent`` chain when asked for.
    """
    left: Stack
    right: Stack = ()
    parent: Optional['State'] = field(default=None, repr=False, compare=False)
    operation: Optional[Operation] = field(default=None, compare=False)
    depth: int = field(default=0, compare=False)

    def __post_init__(self):
        # Accept any sequence of labels, store tuples.
        object.__setattr__(self, "left", tuple(self.left))
        object.__setattr__(self, "right", tuple(self.right))

    @property
    def operations(self) -> List[Operation]:
        ops: List[Operation] = []
        node: Optional[State] = self
        while node is not None and node.operation is not None:
            ops.append(node.operation)
            node = node.parent
        ops.reverse()
        return ops


def make_state(left: Iterable[int], right: Iterable[int] = ()) -> State:
    return State(tuple(left), tuple(right))


def state_key(state: State) -> str:
    return ",".join(str(x) for x in state.left) + "/" + ",".join(str(x) for x in state.right)


# --- Meaningfulness predicates ---
# A move is skipped when an element it inspects is the placeholder.
def _can_push_to_left(state: State) -> bool:
    return len(state.right) != 0 and state.right[0] != PLACEHOLDER

def _can_push_to_right(state: State) -> bool:
    return len(state.left) != 0 and state.left[0] != PLACEHOLDER

def _can_swap(stack: Stack) -> bool:
    return len(stack) >= 2 and stack[0] != PLACEHOLDER and stack[1] != PLACEHOLDER

def _can_rotate(stack: Stack) -> bool:
    return len(stack) >= 2 and stack[0] != PLACEHOLDER

def _can_reverse_rotate(stack: Stack) -> bool:
    return len(stack) >= 2 and stack[-1] != PLACEHOLDER


IS_MEANINGFUL: Dict[Operation, Callable[[State], bool]] = {
    Operation.PA: _can_push_to_left,
    Operation.PB: _can_push_to_right,
    Operation.SA: lambda s: _can_swap(s.left),
    Operation.SB: lambda s: _can_swap(s.right),
    Operation.SS: lambda s: _can_swap(s.left) and _can_swap(s.right),
    Operation.RA: lambda s: _can_rotate(s.left),
    Operation.RB: lambda s: _can_rotate(s.right),
    Operation.RR: lambda s: _can_rotate(s.left) and _can_rotate(s.right),
    Operation.RRA: lambda s: _can_reverse_rotate(s.left),
    Operation.RRB: lambda s: _can_reverse_rotate(s.right),
    Operation.RRR: lambda s: _can_reverse_rotate(s.left) and _can_reverse_rotate(s.right),
}


# --- Stack moves ---
def _swap(stack: Stack) -> Stack:
    return (stack[1], stack[0]) + stack[2:]

def _rotate(stack: Stack) -> Stack:
    return stack[1:] + stack[:1]

def _reverse_rotate(stack: Stack) -> Stack:
    return stack[-1:] + stack[:-1]


APPLY: Dict[Operation, Callable[[Stack, Stack], Tuple[Stack, Stack]]] = {
    Operation.PA: lambda left, right: (right[:1] + left, right[1:]),
    Operation.PB: lambda left, right: (left[1:], left[:1] + right),
    Operation.SA: lambda left, right: (_swap(left), right),
    Operation.SB: lambda left, right: (left, _swap(right)),
    Operation.SS: lambda left, right: (_swap(left), _swap(right)),
    Operation.RA: lambda left, right: (_rotate(left), right),
    Operation.RB: lambda left, right: (left, _rotate(right)),
    Operation.RR: lambda left, right: (_rotate(left), _rotate(right)),
    Operation.RRA: lambda left, right: (_reverse_rotate(left), right),
    Operation.RRB: lambda left, right: (left, _reverse_rotate(right)),
    Operation.RRR: lambda left, right: (_reverse_rotate(left), _reverse_rotate(right)),
}

REVERSE_OPERATIONS: Dict[Operation, Operation] = {
    Operation.PA: Operation.PB,
    Operation.PB: Operation.PA,
    Operation.SA: Operation.SA,
    Operation.SB: Operation.SB,
    Operation.SS: Operation.SS,
    Operation.RA: Operation.RRA,
    Operation.RB: Operation.RRB,
    Operation.RR: Operation.RRR,
    Operation.RRA: Operation.RA,
    Operation.RRB: Operation.RB,
    Operation.RRR: Operation.RR,
}

# Cheaper and more general moves first; pushes last.  Only decides which of several
# equally short paths gets recorded.
OPERATIONS_IN_EFFICIENCY_ORDER: List[Operation] = [
    Operation.RA,
    Operation.RB,
    Operation.RRA,
    Operation.RRB,
    Operation.SA,
    Operation.SB,
    Operation.RR,
    Operation.RRR,
    Operation.SS,
    Operation.PA,
    Operation.PB,
]


def apply_operation(state: State, op: Operation) -> State:
    if not IS_MEANINGFUL[op](state):
        raise AssertionError(f"Operation {op.value} is not meaningful for {state_key(state)}")
    left, right = APPLY[op](state.left, state.right)
    return State(left, right, parent=state, operation=op, depth=state.depth + 1)


def successors(state: State) -> Iterator[State]:
    for op in OPERATIONS_IN_EFFICIENCY_ORDER:
        if IS_MEANINGFUL[op](state):
            yield apply_operation(state, op)


def invert_operations(ops: Iterable[Operation]) -> List[Operation]:
    """Turn a path A -> B into the path B -> A."""
    return [REVERSE_OPERATIONS[op] for op in reversed(list(ops))]


# --- Search ---
def get_all_cases(initial_state: State) -> Tuple[int, Dict[str, State], List[List[State]]]:
    """
    Breadth-first enumeration of every state reachable from ``initial_state``.

    Returns ``(max_distance, states_by_key, layers)``.  ``layers[d]`` holds the states
    first discovered ``d`` moves away from the start, in discovery order; the first
    path that reaches a stack-content pair is the one kept.  Expansion stops at the
    first empty layer, which is not included, so ``max_distance == len(layers) - 1``.
    """
    visited: Dict[str, State] = {state_key(initial_state): initial_state}
    layers: List[List[State]] = [[initial_state]]

    while True:
        next_layer: List[State] = []
        for current in layers[-1]:
            for candidate in successors(current):
                key = state_key(candidate)
                if key not in visited:
                    visited[key] = candidate
                    next_layer.append(candidate)
        if not next_layer:
            return len(layers) - 1, visited, layers
        layers.append(next_layer)


Solution = List[Tuple[Stack, List[Operation]]]


def get_solution(left: Iterable[int], right: Iterable[int],
                 goal: Callable[[State], bool]) -> Tuple[int, Solution]:
    """
    Solve every arrangement matching ``goal`` at once.

    The search is seeded with the target arrangement and runs outward, so each
    recorded path leads *from* the seed *to* an arrangement.  Inverting and reversing
    it gives the sequence that brings that arrangement back to the seed.

    Records are sorted by arrangement, then by solution length; remaining ties keep
    discovery order.  A goal that matches nothing yields ``(0, [])``.
    """
    _, _, layers = get_all_cases(make_state(left, right))

    solution: Solution = [
        (state.left, invert_operations(state.operations))
        for layer in layers
        for state in layer
        if goal(state)
    ]
    solution.sort(key=lambda rec: (rec[0], len(rec[1])))

    max_operations = max((len(ops) for _, ops in solution), default=0)
    return max_operations, solution


# --- Report helpers ---
def ops_to_string(ops: Iterable[Operation]) -> str:
    return " ".join(op.value for op in ops)


def operations_from_string(text: str) -> List[Operation]:
    return [Operation(tok) for tok in str(text).split()]


def stack_to_string(stack: Iterable[int]) -> str:
    return " ".join(str(x) for x in stack if x != PLACEHOLDER)


def save_report_txt(path: Path, max_ops: int, solution: Solution) -> None:
    """Write the plain-text report: a max-operations header, then one line per arrangement."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        f.write(f"Max Operations: {max_ops}\n")
        for left, ops in solution:
            f.write(f'Stack: "{stack_to_string(left)}", Operations: "{ops_to_string(ops)}"\n')


def get_solution_dataframe(solution: Solution) -> pd.DataFrame:
    return pd.DataFrame([{"stack": stack_to_string(left),
                          "left": ",".join(str(x) for x in left),
                          "operations": ops_to_string(ops),
                          "operation_count": len(ops)} for left, ops in solution],
                        columns=["stack", "left", "operations", "operation_count"])


def save_solution_to_csv(path: Path, solution: Solution) -> None:
    df = get_solution_dataframe(solution)
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(path, index=False)


def get_summary(name: str, count: int, max_ops: int, solution: Solution) -> Dict[str, Any]:
    """
    Summarise one solved variant.

    ``length_histogram`` maps a solution length to the number of arrangements whose
    optimal solution has that length.
    """
    histogram: Dict[int, int] = {}
    for _, ops in solution:
        histogram[len(ops)] = histogram.get(len(ops), 0) + 1
    return {
        "variant": name,
        "count": count,
        "max_operations": max_ops,
        "solution_count": len(solution),
        "length_histogram": {str(k): histogram[k] for k in sorted(histogram)},
    }


def save_summary_json(path: Path, summary: Dict[str, Any]) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        json.dump(summary, f, indent=2)


def write_solution_sql(engine, table: str, solution: Solution) -> None:
    get_solution_dataframe(solution).to_sql(table, engine, if_exists="replace", index=False)


def read_solution_sql(engine, table: str) -> Solution:
    df = pd.read_sql_table(table, engine)
    df.columns = [c.strip().lower() for c in df.columns]
    for c in ["left", "operations"]:
        if c not in df.columns:
            raise ValueError(f"Table {table} missing required column '{c}'")
    solution: Solution = []
    for _, row in df.iterrows():
        left_text = "" if pd.isna(row["left"]) else str(row["left"])
        ops_text = "" if pd.isna(row["operations"]) else str(row["operations"])
        left = tuple(int(x) for x in left_text.split(",") if x != "")
        solution.append((left, operations_from_string(ops_text)))
    return solution
