import sys
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from stack_solver import (Operation, make_state, apply_operation, successors, get_all_cases,
                          invert_operations, OPERATIONS_IN_EFFICIENCY_ORDER, REVERSE_OPERATIONS)


def contents(state):
    return state.left, state.right


@pytest.mark.parametrize("op, left, right", [
    (Operation.PA, (4, 1, 2, 3), (5,)),
    (Operation.PB, (2, 3), (1, 4, 5)),
    (Operation.SA, (2, 1, 3), (4, 5)),
    (Operation.SB, (1, 2, 3), (5, 4)),
    (Operation.SS, (2, 1, 3), (5, 4)),
    (Operation.RA, (2, 3, 1), (4, 5)),
    (Operation.RB, (1, 2, 3), (5, 4)),
    (Operation.RR, (2, 3, 1), (5, 4)),
    (Operation.RRA, (3, 1, 2), (4, 5)),
    (Operation.RRB, (1, 2, 3), (5, 4)),
    (Operation.RRR, (3, 1, 2), (5, 4)),
])
def test_apply_moves_stacks(op, left, right):
    start = make_state([1, 2, 3], [4, 5])
    moved = apply_operation(start, op)
    assert contents(moved) == (left, right)
    assert moved.operations == [op]
    assert moved.depth == 1
    # the source state is left untouched
    assert contents(start) == ((1, 2, 3), (4, 5))


def test_placeholder_blocks_moves_that_inspect_it():
    front_pad = make_state([0, 1], [])
    assert not Operation.PB.is_meaningful(front_pad)
    assert not Operation.RA.is_meaningful(front_pad)
    assert not Operation.SA.is_meaningful(front_pad)
    assert Operation.RRA.is_meaningful(front_pad)

    back_pad = make_state([1, 0], [0])
    assert Operation.PB.is_meaningful(back_pad)
    assert Operation.RA.is_meaningful(back_pad)
    assert not Operation.RRA.is_meaningful(back_pad)
    assert not Operation.PA.is_meaningful(back_pad)
    assert not Operation.RB.is_meaningful(back_pad)


def test_double_moves_need_both_sides():
    state = make_state([1, 2], [3])
    assert Operation.SA.is_meaningful(state)
    assert not Operation.SS.is_meaningful(state)
    assert not Operation.RR.is_meaningful(state)
    assert not Operation.RRR.is_meaningful(state)
    assert Operation.RR.is_meaningful(make_state([1, 2], [3, 4]))


def test_apply_rejects_moves_that_are_not_meaningful():
    with pytest.raises(AssertionError):
        apply_operation(make_state([1], []), Operation.SA)
    with pytest.raises(AssertionError):
        apply_operation(make_state([1, 2], []), Operation.PA)


def test_successors_follow_efficiency_order():
    ops = [s.operation for s in successors(make_state([1, 2, 3], []))]
    assert ops == [Operation.RA, Operation.RRA, Operation.SA, Operation.PB]


def test_efficiency_order_covers_every_operation_once():
    assert sorted(op.value for op in OPERATIONS_IN_EFFICIENCY_ORDER) == sorted(op.value for op in Operation)


def test_inverse_table_is_an_involution():
    for op in Operation:
        assert REVERSE_OPERATIONS[op].inverse is op
    assert Operation.PA.inverse is Operation.PB
    assert Operation.SS.inverse is Operation.SS
    assert Operation.RR.inverse is Operation.RRR


@pytest.mark.parametrize("left, right", [
    ([1, 2, 3, 0], [0]),
    ([0], [0, 1, 2, 3]),
    ([1, 2, 3], []),
])
def test_move_then_inverse_restores_contents(left, right):
    _, visited, _ = get_all_cases(make_state(left, right))
    for state in visited.values():
        for op in Operation:
            if not op.is_meaningful(state):
                continue
            back = apply_operation(apply_operation(state, op), op.inverse)
            assert contents(back) == contents(state)


def test_invert_operations_reverses_and_inverts():
    path = [Operation.RA, Operation.SA, Operation.PB]
    assert invert_operations(path) == [Operation.PA, Operation.SA, Operation.RRA]
    assert invert_operations([]) == []
