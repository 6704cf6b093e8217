import sys
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[1]))

from stack_solver import Operation, get_solution, make_state, apply_operation


def sorted_goal(state):
    return state.left == (1, 2, 3) and state.right == ()


def replay(left, right, ops):
    state = make_state(left, right)
    for op in ops:
        state = apply_operation(state, op)
    return state.left, state.right


def test_seed_already_at_goal():
    assert get_solution([1, 2, 3], [], sorted_goal) == (0, [((1, 2, 3), [])])


def test_reversed_seed_needs_two_moves():
    max_ops, solution = get_solution([3, 2, 1], [], sorted_goal)
    assert max_ops == 2
    assert solution == [((1, 2, 3), [Operation.SA, Operation.RRA])]
    assert replay([1, 2, 3], [], solution[0][1]) == ((3, 2, 1), ())


def test_unreachable_goal_gives_empty_result():
    assert get_solution([1, 2, 3], [], lambda state: len(state.left) == 7) == (0, [])


def test_every_arrangement_is_solved_back_to_the_seed():
    max_ops, solution = get_solution([1, 2, 3, 4], [], lambda state: len(state.left) == 4)
    assert len(solution) == 24
    for left, ops in solution:
        assert replay(left, [], ops) == ((1, 2, 3, 4), ())
    assert max_ops == max(len(ops) for _, ops in solution)
    assert dict(solution)[(1, 2, 3, 4)] == []


def test_solutions_are_sorted_without_duplicates():
    _, solution = get_solution([1, 2, 3, 4], [], lambda state: len(state.left) == 4)
    arrangements = [left for left, _ in solution]
    assert arrangements == sorted(arrangements)
    assert len(arrangements) == len(set(arrangements))


def test_ties_sort_by_solution_length():
    # 1/2,3 and 1/3,2 share a left stack
    _, solution = get_solution([1, 2, 3], [], lambda state: state.left == (1,))
    assert [left for left, _ in solution] == [(1,), (1,)]
    lengths = [len(ops) for _, ops in solution]
    assert lengths == sorted(lengths)
