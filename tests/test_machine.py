'''
RPN machine tests
'''

import math

import regex

from rpncalc.util import DivisionByZero
from rpncalc.machine import Control, Machine, Number, Operation, Operator

from pytest import mark, raises


def stacked(*values):
    m = Machine()
    for value in values:
        m.push(value)
    return m


def test_push_pop():
    m = stacked(1.5)
    m.push(-2.25)
    assert m.pop() == -2.25
    assert m.pop() == 1.5
    assert m.stack == []


def test_pop_empty():
    m = Machine()
    assert m.pop() is None
    assert m.stack == []


def test_operand_order():
    m = stacked(7.0, 2.0)
    m.apply(Operator.SUB)
    assert m.stack == [5.0]

    m = stacked(7.0, 2.0)
    m.apply(Operator.DIV)
    assert m.stack == [3.5]

    m = stacked(7.0, 2.0)
    m.apply(Operator.ADD)
    assert m.stack == [9.0]

    m = stacked(7.0, 2.0)
    m.apply(Operator.MUL)
    assert m.stack == [14.0]


def test_repeat_same_as_sequence():
    repeated = stacked(1.0, 2.0, 3.0, 4.0)
    repeated.apply(Operator.SUB, 3)

    sequential = stacked(1.0, 2.0, 3.0, 4.0)
    for _ in range(3):
        sequential.apply(Operator.SUB, 1)

    # 3 - 4, then 2 - -1, then 1 - 3
    assert repeated.stack == sequential.stack == [-2.0]


def test_repeat_stops_short():
    m = stacked(1.0, 2.0, 3.0)
    m.apply(Operator.ADD, 99)
    assert m.stack == [6.0]


@mark.parametrize('n', range(6))
def test_apply_all(n):
    m = stacked(*[float(i) for i in range(1, n + 1)])
    m.apply(Operator.ADD, 0)
    if n:
        assert m.stack == [n * (n + 1) / 2]
    else:
        assert m.stack == []


def test_apply_all_counted_up_front():
    m = stacked(2.0, 3.0, 4.0)
    m.apply(Operator.MUL, 0)
    assert m.stack == [24.0]


@mark.parametrize('values', [(), (3.0,)])
def test_underflow_is_silent(values):
    m = stacked(*values)
    for op in Operator:
        m.apply(op)
    assert m.stack == list(values)


def test_division_by_zero():
    m = stacked(5.0, 0.0)
    with raises(DivisionByZero, match=regex.escape('division by zero')):
        m.apply(Operator.DIV)
    assert m.stack == []
    m.push(1.0)
    assert m.stack == [1.0]


def test_division_by_negative_zero():
    m = stacked(5.0, -0.0)
    with raises(DivisionByZero):
        m.apply(Operator.DIV)
    assert m.stack == []


def test_division_by_zero_midway():
    # 4 / 2, then 0 / 2, then 8 / 0
    m = stacked(8.0, 0.0, 4.0, 2.0)
    with raises(DivisionByZero):
        m.apply(Operator.DIV, 3)
    assert m.stack == []

    m = stacked(1.0, 8.0, 0.0, 4.0, 2.0)
    with raises(DivisionByZero):
        m.apply(Operator.DIV, 0)
    # Remaining repetitions abandoned
    assert m.stack == [1.0]


def test_clear_idempotent():
    m = stacked(1.0, 2.0, 3.0)
    m.clear()
    assert m.stack == []
    m.clear()
    assert m.stack == []


def test_size_never_negative():
    m = Machine()
    m.push(1.0)
    for _ in range(3):
        m.feed(Control.DROP)
    assert len(m.render()) == 0
    m.push(2.0)
    assert len(m.render()) == 1


def test_feed():
    m = Machine()
    for command in [Number(1.0), Number(2.0), Number(3.0),
                    Operation(Operator.ADD, 1),
                    Number(4.0),
                    Control.DROP]:
        m.feed(command)
    assert m.stack == [1.0, 5.0]
    assert m.running

    m.feed(Control.CLEAR)
    assert m.stack == []

    m.feed(Control.QUIT)
    assert not m.running


def test_feed_garbage():
    m = Machine()
    with raises(TypeError):
        m.feed('+')


def test_render():
    m = stacked(1.0, -2.5, 1 / 3, 1e6)
    assert m.render() == ['1.000000', '-2.500000', '0.333333',
                          '1000000.000000']


def test_render_overflow():
    m = stacked(1e308, 10.0)
    m.apply(Operator.MUL)
    assert math.isinf(m.stack[0])
    assert m.render() == ['inf']
