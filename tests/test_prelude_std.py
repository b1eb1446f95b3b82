import pytest

from lispy.errors import ErrorKind
from lispy.interpreter import Interpreter
from lispy.types.expressions import QExpr
from lispy.types.lambda_fn import Lambda


@pytest.fixture(scope="module")
def std():
    # Packaged prelude (LISPY_PRELUDE_PATH unset)
    return Interpreter()


def test_nil_is_empty_list(std):
    assert std.eval("nil") == QExpr()
    assert std.eval("len nil") == 0


def test_first_second(std):
    assert std.eval("first {7 8 9}") == 7
    assert std.eval("second {7 8 9}") == 8
    assert std.eval("first {{1 2} 3}") == QExpr([1.0, 2.0])
    assert std.eval("first nil").kind is ErrorKind.EMPTY_LIST


def test_unpack_and_curry(std):
    assert std.eval("unpack + {1 2 3}") == 6
    assert std.eval("curry * {2 3 4}") == 24
    assert std.eval("(curry head) {{1 2}}") == QExpr([1.0])


def test_pack_and_uncurry(std):
    assert std.eval("pack head 5 6 7") == QExpr([5.0])
    assert std.eval("uncurry len 1 2 3") == 3


def test_prelude_definitions_are_lambdas(std):
    assert isinstance(std.eval("first"), Lambda)


def test_explicit_prelude_source():
    itp = Interpreter(prelude="(def {two} 2) (def {four} (* two two))")
    assert itp.eval("four") == 4


def test_no_prelude():
    itp = Interpreter(prelude=None)
    assert itp.eval("nil").kind is ErrorKind.UNBOUND_SYMBOL


def test_prelude_path_from_environment(tmp_path, monkeypatch):
    prelude = tmp_path / "custom.lspy"
    prelude.write_text("(def {answer} 42)\n", encoding="utf-8")
    monkeypatch.setenv("LISPY_PRELUDE_PATH", str(prelude))
    itp = Interpreter()
    assert itp.eval("answer") == 42
    assert itp.eval("first").kind is ErrorKind.UNBOUND_SYMBOL


def test_prelude_directory_from_environment(tmp_path, monkeypatch):
    (tmp_path / "prelude.lspy").write_text("(def {answer} 7)\n", encoding="utf-8")
    monkeypatch.setenv("LISPY_PRELUDE_PATH", str(tmp_path))
    assert Interpreter().eval("answer") == 7


def test_missing_prelude_is_permitted(tmp_path, monkeypatch):
    monkeypatch.setenv("LISPY_PRELUDE_PATH", str(tmp_path / "absent.lspy"))
    itp = Interpreter()
    assert itp.eval("+ 1 1") == 2
