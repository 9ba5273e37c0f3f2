import pytest

from calculator import (
    Command,
    ERROR_STATE,
    INITIAL_STATE,
    Entry,
    State,
    transition,
)


def s(cur, acc=None, op=None, eq=False):
    return State(Entry(cur), acc, op, eq)


TRANSITIONS = [
    # digit / point
    (INITIAL_STATE, Command('digit', '5'), s('5'), '5'),
    (s('12'), Command('digit', '3'), s('123'), '123'),
    (s('0', eq=True), Command('digit', '4'), s('4'), '4'),
    (s('9', eq=True), Command('point'), s('0.'), '0.'),
    (s('1.5'), Command('point'), s('1.5'), '1.5'),
    (s('0', 3.0, 'add'), Command('digit', '0'), s('0', 3.0, 'add'), '0'),
    # operator
    (s('5'), Command('operator', '+'), s('0', 5.0, 'add'), '0'),
    (s('3', 5.0, 'add'), Command('operator', '×'), s('0', 8.0, 'multiply'), '0'),
    (s('7', eq=True), Command('operator', '−'), s('0', 7.0, 'subtract'), '0'),
    (s('0', 5.0, 'divide'), Command('operator', '+'), ERROR_STATE, 'Error'),
    # equals
    (s('2', 8.0, 'multiply'), Command('equals'), s('16', eq=True), '16'),
    (s('7'), Command('equals'), s('7', eq=True), '7'),
    (s('3', None, 'add'), Command('equals'), s('3', eq=True), '3'),
    (s('0', 4.0, 'divide'), Command('equals'), ERROR_STATE, 'Error'),
    # clear / negate / percent / backspace
    (s('3', 5.0, 'add', False), Command('clear'), INITIAL_STATE, '0'),
    (s('-5'), Command('negate'), s('5'), '5'),
    (s('0', 2.0, 'add'), Command('negate'), s('0', 2.0, 'add'), '0'),
    (s('50', 2.0, 'add'), Command('percent'), s('0.5', 2.0, 'add'), '0.5'),
    (s('16', eq=True), Command('backspace'), INITIAL_STATE, '0'),
    (s('1e-9'), Command('backspace'), s('1'), '1'),
]


@pytest.mark.parametrize('state, command, expected_state, expected_display', TRANSITIONS)
def test_transition(state, command, expected_state, expected_display):
    new_state, display = transition(state, command)
    assert new_state == expected_state
    assert display == expected_display


@pytest.mark.parametrize('command', [
    Command('digit', '7'),
    Command('point'),
    Command('operator', '÷'),
    Command('equals'),
    Command('negate'),
    Command('percent'),
    Command('backspace'),
])
def test_error_absorbs_everything_but_clear(command):
    assert transition(ERROR_STATE, command) == (ERROR_STATE, 'Error')


def test_clear_leaves_error():
    assert transition(ERROR_STATE, Command('clear')) == (INITIAL_STATE, '0')


def test_point_after_exponent_is_dropped():
    state = s('1e-9')
    assert transition(state, Command('point')) == (state, '1e-9')


def test_transition_does_not_mutate_input():
    state = s('3', 5.0, 'add')
    transition(state, Command('equals'))
    assert state == s('3', 5.0, 'add')
