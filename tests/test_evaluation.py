import pytest

from quill.evaluation.evaluator import evaluate
from quill.printer import to_string
from quill.reader.parser import parse
from quill.types.cell import Cell, from_list
from quill.types.errors import (
    QuillArityError,
    QuillEvalError,
    QuillNotFoundError,
    QuillTypeError,
)
from quill.types.bind import Arity
from quill.types.function import Closure, Function, NativeFunction
from quill.types.nil import Nil
from quill.types.quoted import Quoted
from quill.types.special_form import SpecialForm
from quill.types.symbol import Symbol


def run(scope, source):
    return evaluate(scope, parse(source))


# -----------------------------------------------------
# Self-evaluation, lookup and quoting
# -----------------------------------------------------

def test_self_evaluating_values(scope):
    assert evaluate(scope, Nil) is Nil
    car = scope.lookup("car")
    assert evaluate(scope, car) is car
    quote = scope.lookup("quote")
    assert evaluate(scope, quote) is quote


def test_symbol_lookup(scope):
    child = scope.new_child({"x": Symbol("42")})
    assert evaluate(child, Symbol("x")) == Symbol("42")
    with pytest.raises(QuillNotFoundError):
        evaluate(child, Symbol("z"))


def test_quote_special_form(scope):
    assert run(scope, "(quote a)") == Symbol("a")


def test_quote_mark_suppresses_evaluation(scope):
    assert run(scope, "'(a b)") == from_list([Symbol("a"), Symbol("b")])


def test_quoted_evaluates_only_one_level(scope):
    assert run(scope, "''a") == Quoted(Symbol("a"))


def test_empty_list_is_nil(scope):
    assert run(scope, "()") is Nil
    assert run(scope, "nil") is Nil


# -----------------------------------------------------
# Native functions
# -----------------------------------------------------

def test_cons_car_cdr(scope):
    assert to_string(run(scope, "(cons 'a 'b)")) == "(a . b)"
    assert run(scope, "(car '(a b))") == Symbol("a")
    assert to_string(run(scope, "(cdr '(a b))")) == "(b)"
    assert to_string(run(scope, "(cons 'a (cons 'b nil))")) == "(a b)"


def test_list_is_variadic(scope):
    assert run(scope, "(list)") is Nil
    assert to_string(run(scope, "(list 'a 'b (list 'c))")) == "(a b (c))"


@pytest.mark.parametrize("source", ["(car)", "(car 'a 'b)", "(cdr)", "(cons 'a)", "(cons 'a 'b 'c)"])
def test_native_arity_errors(scope, source):
    with pytest.raises(QuillArityError):
        run(scope, source)


@pytest.mark.parametrize("source", ["(car 'a)", "(cdr 'a)", "(car nil)"])
def test_car_cdr_type_errors(scope, source):
    with pytest.raises(QuillTypeError):
        run(scope, source)


def test_calling_unbound_name(scope):
    with pytest.raises(QuillNotFoundError):
        run(scope, "(frobnicate 'a)")


def test_applying_non_callable(scope):
    with pytest.raises(QuillEvalError, match="not callable: a"):
        run(scope, "('a 'b)")


def test_improper_list_car_succeeds_but_application_fails(scope):
    improper = Cell(scope.lookup("car"), Symbol("x"))
    assert evaluate(scope, Cell(scope.lookup("car"), Cell(Quoted(improper), Nil))) is scope.lookup("car")
    with pytest.raises(QuillTypeError):
        evaluate(scope, improper)


def test_operands_evaluated_left_to_right(scope):
    seen = []

    def trace(name):
        def routine(args):
            seen.append(name)
            return Symbol(name)
        return NativeFunction(name, Arity(0), routine)

    child = scope.new_child({"f": trace("f"), "g": trace("g")})
    assert to_string(run(child, "(cons (f) (g))")) == "(f . g)"
    assert seen == ["f", "g"]


# -----------------------------------------------------
# Lambda and lexical scope
# -----------------------------------------------------

def test_lambda_builds_closure(scope):
    fn = run(scope, "(lambda (x) x)")
    assert isinstance(fn, Closure) and isinstance(fn, Function)
    assert fn.scope is scope


def test_lambda_application(scope):
    assert run(scope, "((lambda (x y) (cons y x)) 'a 'b)") == Cell(Symbol("b"), Symbol("a"))


def test_lambda_without_formals(scope):
    assert run(scope, "((lambda () 'done))") == Symbol("done")


def test_lexical_capture(scope):
    outer = scope.new_child({"x": Symbol("1")})
    fn = run(outer, "(lambda (y) (cons x y))")
    # The call site sees a different x; the closure must not.
    call_site = scope.new_child({"x": Symbol("other"), "f": fn})
    assert to_string(run(call_site, "(f '2)")) == "(1 . 2)"
    assert to_string(run(outer, "((lambda (y) (cons x y)) '2)")) == "(1 . 2)"


def test_closure_does_not_see_caller_bindings(scope):
    fn = run(scope, "(lambda () secret)")
    caller = scope.new_child({"secret": Symbol("s"), "f": fn})
    with pytest.raises(QuillNotFoundError):
        run(caller, "(f)")


def test_nested_closures_share_captured_scope(scope):
    make_pair = run(scope, "(lambda (a) (lambda (b) (cons a b)))")
    child = scope.new_child({"mk": make_pair})
    with_a = run(child, "(mk 'left)")
    other = child.new_child({"g": with_a})
    assert to_string(run(other, "(g 'r1)")) == "(left . r1)"
    assert to_string(run(other, "(g 'r2)")) == "(left . r2)"


@pytest.mark.parametrize("source", ["((lambda (x) x))", "((lambda (x) x) 'a 'b)", "((lambda () 'a) 'b)"])
def test_closure_arity_errors(scope, source):
    with pytest.raises(QuillArityError):
        run(scope, source)


def test_splat_formal_collects_remaining(scope):
    assert to_string(run(scope, "((lambda (a *rest) (cons a rest)) 'x 'y 'z)")) == "(x y z)"
    assert to_string(run(scope, "((lambda (a *rest) rest) 'x)")) == "nil"
    with pytest.raises(QuillArityError):
        run(scope, "((lambda (a *rest) rest))")


@pytest.mark.parametrize(
    "source",
    [
        "(lambda (*a b) a)",       # splat not last
        "(lambda (*a *b) a)",      # two splats
        "(lambda (a 'b) a)",       # non-symbol formal
        "(lambda x x)",            # formals not a list
    ]
)
def test_malformed_formals(scope, source):
    with pytest.raises(QuillTypeError):
        run(scope, source)


def test_duplicate_formals(scope):
    with pytest.raises(QuillEvalError):
        run(scope, "(lambda (a a) a)")


def test_lambda_special_form_arity(scope):
    with pytest.raises(QuillArityError):
        run(scope, "(lambda (x))")
    with pytest.raises(QuillArityError):
        run(scope, "(quote a b)")


def test_special_forms_are_first_class(scope):
    q = run(scope, "quote")
    assert isinstance(q, SpecialForm)
    child = scope.new_child({"q": q})
    assert run(child, "(q a)") == Symbol("a")


def test_failed_evaluation_leaves_values_intact(scope):
    data = run(scope, "'(a b)")
    child = scope.new_child({"data": data})
    with pytest.raises(QuillTypeError):
        run(child, "(car (car data))")
    assert to_string(run(child, "data")) == "(a b)"


def test_values_are_immutable(scope):
    cell = run(scope, "(cons 'a 'b)")
    with pytest.raises(AttributeError):
        cell.left = Nil
    with pytest.raises(AttributeError):
        Symbol("a").name = "b"
