import pytest

from pushswap.stacks import Node, PushSwap


def contents(stack):
    return [node.content for node in stack]


def test_initial_state():
    machine = PushSwap([3, 1, 2])
    assert contents(machine.a) == [3, 1, 2]
    assert machine.b == []
    assert machine.moves == []
    assert machine.a[0] == Node(3)


def test_swap_a():
    machine = PushSwap([1, 2, 3])
    machine.swap("a")
    assert contents(machine.a) == [2, 1, 3]
    assert machine.moves == ["sa"]


def test_swap_short_stack_does_nothing():
    machine = PushSwap([7])
    machine.swap("a")
    machine.swap("b")
    assert contents(machine.a) == [7]
    assert machine.moves == []


def test_rotate_and_reverse_rotate():
    machine = PushSwap([1, 2, 3, 4])
    machine.rotate("a")
    assert contents(machine.a) == [2, 3, 4, 1]
    machine.reverse_rotate("a")
    assert contents(machine.a) == [1, 2, 3, 4]
    assert machine.moves == ["ra", "rra"]


def test_rotate_empty_does_nothing():
    machine = PushSwap([])
    machine.rotate("a")
    machine.reverse_rotate("b")
    assert machine.moves == []


def test_push_between_stacks():
    machine = PushSwap([5, 6, 7])
    machine.push("b")
    machine.push("b")
    assert contents(machine.a) == [7]
    assert contents(machine.b) == [6, 5]
    machine.push("a")
    assert contents(machine.a) == [6, 7]
    assert contents(machine.b) == [5]
    assert machine.moves == ["pb", "pb", "pa"]


def test_push_from_empty_does_nothing():
    machine = PushSwap([1])
    machine.push("a")
    assert contents(machine.a) == [1]
    assert machine.moves == []


def test_push_keeps_node_attributes():
    machine = PushSwap([9, 8])
    machine.a[0].target = 2
    machine.push("b")
    assert machine.b[0].target == 2
    assert machine.b[0].content == 9


def test_combined_moves():
    machine = PushSwap([1, 2, 3, 4, 5, 6])
    for _ in range(3):
        machine.push("b")
    assert contents(machine.b) == [3, 2, 1]
    machine.ss()
    assert contents(machine.a) == [5, 4, 6]
    assert contents(machine.b) == [2, 3, 1]
    machine.rr()
    assert contents(machine.a) == [4, 6, 5]
    assert contents(machine.b) == [3, 1, 2]
    machine.rrr()
    assert contents(machine.a) == [5, 4, 6]
    assert contents(machine.b) == [2, 3, 1]
    assert machine.moves[-3:] == ["ss", "rr", "rrr"]


def test_combined_move_recorded_even_when_idle():
    machine = PushSwap([])
    machine.rr()
    assert machine.moves == ["rr"]


def test_rotation_cycle_restores_order():
    numbers = [4, -2, 9, 0, 13]
    machine = PushSwap(numbers)
    for _ in numbers:
        machine.rotate("a")
    assert contents(machine.a) == numbers
    assert len(machine.moves) == len(numbers)


def test_unknown_stack_name():
    machine = PushSwap([1, 2])
    with pytest.raises(ValueError):
        machine.rotate("c")


def test_describe():
    machine = PushSwap([42])
    machine.a[0].target = 1
    text = machine.describe("a")
    lines = text.splitlines()
    assert lines[0] == "=================================="
    assert lines[1] == "stack a1 "
    assert lines[2] == "content  ; 42 "
    assert lines[3] == "target  ; 1 "
    assert lines[-1] == "=================================="


def test_describe_empty_stack():
    machine = PushSwap([1, 2])
    assert machine.describe("b") == ""
    assert machine.describe("a").count("stack a") == 2