import math

import numpy as np
import pytest

from valuegraph import Add, Mul, Sub, Tanh, add, leaf, mul, sub, tanh


def test_example_expression():
    v1 = leaf(0.5)
    v2 = leaf(0.3)
    v3 = add(v1, v2)
    assert v3.data == pytest.approx(0.8)
    v4 = sub(v3, v2)
    assert v4.data == pytest.approx(0.5)
    v5 = mul(v4, v2)
    assert v5.data == pytest.approx(0.15)
    v6 = tanh(v5)
    assert v6.data == pytest.approx(math.tanh(v5.data))
    assert v6.data == pytest.approx(math.tanh(0.15))


@pytest.mark.parametrize("x, y", [(0.5, 0.3), (-2.0, 7.25), (1e200, -1e100), (0.0, -0.0)])
def test_binary_ops_compute_eagerly(x, y):
    a, b = leaf(x), leaf(y)
    assert add(a, b).data == a.data + b.data
    assert sub(a, b).data == a.data - b.data
    assert mul(a, b).data == a.data * b.data


def test_value_fixed_at_call_time():
    a, b = leaf(2.0), leaf(3.0)
    c = mul(a, b)
    a.data = 10.0
    assert c.data == 6.0


def test_op_tags_reference_operands():
    a, b = leaf(2.0), leaf(3.0)
    s = add(a, b)
    d = sub(a, b)
    m = mul(a, b)
    t = tanh(a)
    assert isinstance(s.op, Add) and s.op.a is a and s.op.b is b
    assert isinstance(d.op, Sub) and d.operands == (a, b)
    assert isinstance(m.op, Mul) and m.operands == (a, b)
    assert isinstance(t.op, Tanh) and t.operands == (a,)


def test_operators_match_functions():
    a, b = leaf(1.5), leaf(-4.0)
    assert (a + b).data == add(a, b).data
    assert (a - b).data == sub(a, b).data
    assert (a * b).data == mul(a, b).data
    assert a.tanh().data == tanh(a).data


def test_plain_numbers_become_leaves():
    a = leaf(2.0)
    for out, expected in [(a + 1, 3.0), (1 + a, 3.0), (a - 1, 1.0),
                          (5 - a, 3.0), (a * 4, 8.0), (4 * a, 8.0)]:
        assert out.data == expected
        assert all(o.is_leaf for o in out.operands)
        assert a in out.operands


def test_reflected_operands_keep_order():
    a = leaf(2.0)
    out = 5 - a
    assert out.op.b is a
    assert out.op.a.data == 5.0


def test_numpy_scalar_on_the_left():
    a = leaf(2.0)
    out = np.float64(3.0) * a
    assert isinstance(out.op, Mul)
    assert out.data == 6.0


def test_tanh_accepts_number():
    out = tanh(0.0)
    assert out.data == 0.0
    assert out.op.a.is_leaf


@pytest.mark.parametrize("bad", ["x", [1.0], None])
def test_non_numeric_operand_raises(bad):
    a = leaf(1.0)
    with pytest.raises(TypeError):
        add(a, bad)
    with pytest.raises(TypeError):
        a * bad


def test_special_values_propagate():
    nan, inf = leaf(float("nan")), leaf(float("inf"))
    one = leaf(1.0)
    assert math.isnan(add(nan, one).data)
    assert math.isnan(sub(inf, inf).data)
    assert math.isnan(mul(inf, leaf(0.0)).data)
    assert mul(leaf(1e308), leaf(10.0)).data == math.inf
    assert tanh(inf).data == 1.0
    assert tanh(leaf(-math.inf)).data == -1.0
    assert math.isnan(tanh(nan).data)


def test_operand_ids_precede_result():
    a = leaf(1.0)
    out = a + 2.0
    assert out.op.a.id < out.op.b.id < out.id


def test_ops_package_exports():
    import valuegraph.ops as ops
    assert ops.__all__ == ["add", "sub", "mul", "tanh"]
    a = leaf(2.0)
    assert (a * 3).data == ops.mul(a, 3).data
