from dataclasses import dataclass
from typing import List, Dict, Tuple, Callable

from stack_solver import State, Solution, get_solution, PLACEHOLDER

# Naming: first letter is the goal shape (t: placeholder at the tail of the left
# stack, b: placeholder at its head, s: left stack holds exactly the labels), the
# other two letters describe how the seed is laid out across both stacks.

StackBuilder = Callable[[int], List[int]]
GoalBuilder = Callable[[int], Callable[[State], bool]]


def _labels(count: int) -> List[int]:
    return list(range(1, count + 1))

def _labels_then_placeholder(count: int) -> List[int]:
    return _labels(count) + [PLACEHOLDER]

def _placeholder_then_labels(count: int) -> List[int]:
    return [PLACEHOLDER] + _labels(count)

def _placeholder(count: int) -> List[int]:
    return [PLACEHOLDER]

def _empty(count: int) -> List[int]:
    return []


def _placeholder_at_tail(count: int) -> Callable[[State], bool]:
    return lambda state: len(state.left) == count + 1 and state.left[count] == PLACEHOLDER

def _placeholder_at_head(count: int) -> Callable[[State], bool]:
    return lambda state: len(state.left) == count + 1 and state.left[0] == PLACEHOLDER

def _full_left(count: int) -> Callable[[State], bool]:
    return lambda state: len(state.left) == count


@dataclass(frozen=True)
class Variant:
    name: str
    left: StackBuilder
    right: StackBuilder
    goal: GoalBuilder

    def start(self, count: int) -> Tuple[List[int], List[int]]:
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")
        return self.left(count), self.right(count)

    def solve(self, count: int) -> Tuple[int, Solution]:
        left, right = self.start(count)
        return get_solution(left, right, self.goal(count))


_T, _B, _S = _labels_then_placeholder, _placeholder_then_labels, _labels

VARIANTS: Dict[str, Variant] = {v.name: v for v in [
    Variant("tst", _T, _placeholder, _placeholder_at_tail),
    Variant("tsb", _B, _placeholder, _placeholder_at_tail),
    Variant("txt", _T, _empty, _placeholder_at_tail),
    Variant("txb", _B, _empty, _placeholder_at_tail),
    Variant("tot", _placeholder, _T, _placeholder_at_tail),
    Variant("tos", _placeholder, _S, _placeholder_at_tail),
    Variant("tob", _placeholder, _B, _placeholder_at_tail),
    Variant("sss", _S, _placeholder, _full_left),
    Variant("sxs", _S, _empty, _full_left),
    Variant("sot", _empty, _T, _full_left),
    Variant("sos", _empty, _S, _full_left),
    Variant("sob", _empty, _B, _full_left),
    Variant("bst", _T, _placeholder, _placeholder_at_head),
    Variant("bsb", _B, _placeholder, _placeholder_at_head),
    Variant("bxt", _T, _empty, _placeholder_at_head),
    Variant("bxb", _B, _empty, _placeholder_at_head),
    Variant("bot", _placeholder, _T, _placeholder_at_head),
    Variant("bos", _placeholder, _S, _placeholder_at_head),
    Variant("bob", _placeholder, _B, _placeholder_at_head),
]}

VARIANT_NAMES: List[str] = list(VARIANTS)


def get_variant(name: str) -> Variant:
    try:
        return VARIANTS[name]
    except KeyError:
        raise KeyError(f"Unknown variant '{name}'. Known variants: {', '.join(VARIANT_NAMES)}") from None
