import pytest

from pushswap.stack import Stack, StackError


def test_push_returns_value_and_grows():
    stack = Stack()
    assert stack.push(7) == 7
    assert len(stack) == 1
    assert stack.peek() == 7


def test_pop_is_last_in_first_out():
    values = [4, -9, 0, 12]
    stack = Stack()
    for value in values:
        stack.push(value)
    popped = [stack.pop() for _ in values]
    assert popped == values[::-1]
    assert len(stack) == 0


def test_items_given_top_first():
    items = [3, 1, 2]
    stack = Stack(items)
    assert list(stack) == items
    assert stack.peek() == items[0]
    assert stack.pop() == items[0]
    assert list(stack) == items[1:]


def test_push_goes_on_top_of_iteration():
    stack = Stack([5, 6])
    stack.push(4)
    assert list(stack) == [4, 5, 6]


def test_pop_empty_raises():
    with pytest.raises(StackError):
        Stack().pop()


def test_peek_empty_raises():
    with pytest.raises(StackError):
        Stack().peek()


def test_peek_does_not_remove():
    stack = Stack([1, 2])
    assert stack.peek() == stack.peek()
    assert len(stack) == 2


def test_render_pads_non_negative_numbers():
    assert Stack([1, -2]).render() == " 1 -2 \n"


def test_render_empty_is_newline():
    assert Stack().render() == "\n"


def test_render_lists_all_elements():
    items = [10, -20, 30]
    rendered = Stack(items).render()
    assert rendered.split() == [str(item) for item in items]
    assert rendered.endswith("\n")