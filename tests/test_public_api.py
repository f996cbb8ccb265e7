import math

import symbolic_taylor as st


def test_reference_program_flow():
    """cos(x)^2 expanded to degree 5 about 0 and compared at x = 4"""
    x = st.variable()
    f = x.cos().powf(2.0)
    taylor = st.taylor_series(5, 0.0, f)

    assert st.format_expression(f) == "(cos(x) ^ 2)"
    assert abs(st.evaluate(f, 4.0) - math.cos(4.0) ** 2) < 1e-15
    assert math.isfinite(st.evaluate(taylor, 4.0))
    assert st.evaluate(st.derivative(f), 0.0) == 0.0


def test_expression_alias():
    assert st.Expression is st.Node
    assert isinstance(st.variable(), st.Expression)


def test_exports():
    for name in st.__all__:
        assert hasattr(st, name), name
    assert st.__version__
