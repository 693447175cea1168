import pytest

from minima.errors import MinimaArityError, MinimaTypeError, MinimaUnboundAtom
from minima.reader.parser import read
from minima.types.atom import Atom, NIL
from minima.types.environment import from_mapping
from minima.evaluation.evaluator import evaluate
from minima.evaluation.apply import apply_lambda, evlis


def run(source, env):
    return evaluate(read(source), env)


# ------------------ cond ------------------

def test_cond_first_true_clause_wins(env):
    source = "(cond.((nil.(quote.a)).((t.(quote.b)).((t.(quote.c)).nil))))"
    assert run(source, env) == Atom("b")


@pytest.mark.parametrize(
    "source",
    [
        "(cond.((nil.(quote.a)).t))",
        "(cond.((t.(quote.a)).foo))",
        "(cond.foo)",
    ]
)
def test_cond_clause_list_must_end_in_nil(source, env):
    with pytest.raises(MinimaTypeError, match="cond clause list is not nil-terminated"):
        run(source, env)


def test_cond_clause_in_final_cdr_is_not_a_clause(env):
    # the final cdr (t.(quote.c)) is more spine, ending in the atom c
    source = "(cond.((nil.(quote.a)).((nil.(quote.b)).(t.(quote.c)))))"
    with pytest.raises(MinimaTypeError, match="not nil-terminated: ends in c"):
        run(source, env)


def test_malformed_lists_fail_alike_in_cond_and_lambda(env):
    with pytest.raises(MinimaTypeError, match="not nil-terminated: ends in t"):
        run("(cond.((nil.(quote.a)).t))", env)
    with pytest.raises(MinimaTypeError, match="not nil-terminated: ends in t"):
        run("((lambda.((x.nil).x)).((quote.a).t))", env)


def test_cond_all_false_is_nil(env):
    assert run("(cond.((nil.(quote.a)).((nil.(quote.b)).nil)))", env) == NIL


def test_cond_empty_is_nil(env):
    assert run("(cond.nil)", env) == NIL


def test_cond_any_non_nil_predicate_is_true(env):
    source = "(cond.(((quote.yes).(quote.a)).nil))"
    assert run(source, env) == Atom("a")


def test_cond_evaluates_predicates(env):
    source = "(cond.(((atom.(quote.(x.y))).(quote.a)).(((atom.(quote.x)).(quote.b)).nil)))"
    assert run(source, env) == Atom("b")


def test_cond_does_not_evaluate_later_clauses(env):
    # the second clause would fail if it were evaluated
    source = "(cond.((t.(quote.a)).((undefined.(car.nil)).nil)))"
    assert run(source, env) == Atom("a")


def test_cond_clause_must_be_a_pair(env):
    with pytest.raises(MinimaTypeError, match="clause is not a list"):
        run("(cond.(a.nil))", env)


# ------------------ lambda ------------------

def test_lambda_binds_parameters(env):
    source = "((lambda.((x.nil).(cons.(x.(quote.y))))).((quote.a).nil))"
    assert str(run(source, env)) == "(a.y)"


def test_lambda_two_parameters(env):
    source = "((lambda.((x.(y.nil)).(cons.(y.x)))).((quote.a).((quote.b).nil)))"
    assert str(run(source, env)) == "(b.a)"


def test_lambda_no_parameters(env):
    assert run("((lambda.(nil.(quote.z))).nil)", env) == Atom("z")


def test_lambda_parameters_shadow_environment(env):
    env = from_mapping({"x": Atom("outer")}, env)
    source = "((lambda.((x.nil).x)).((quote.inner).nil))"
    assert run(source, env) == Atom("inner")
    # the caller's binding is untouched
    assert run("x", env) == Atom("outer")


def test_lambda_sees_caller_bindings(env):
    env = from_mapping({"y": Atom("free")}, env)
    assert run("((lambda.((x.nil).(cons.(x.y)))).((quote.a).nil))", env) == read("(a.free)")


def test_lambda_arguments_evaluated_in_caller_environment(env):
    env = from_mapping({"x": Atom("caller")}, env)
    source = "((lambda.((y.(x.nil)).x)).((quote.one).(x.nil)))"
    assert run(source, env) == Atom("caller")


def test_lambda_arity_mismatch(env):
    with pytest.raises(MinimaArityError, match="expected 2 arguments, got 1"):
        run("((lambda.((x.(y.nil)).x)).((quote.a).nil))", env)
    with pytest.raises(MinimaArityError):
        run("((lambda.((x.nil).x)).((quote.a).((quote.b).nil)))", env)


def test_lambda_argument_list_must_be_proper(env):
    with pytest.raises(MinimaTypeError, match="argument list"):
        run("((lambda.((x.nil).x)).(quote.a))", env)


def test_lambda_parameter_must_be_atom(env):
    with pytest.raises(MinimaTypeError, match="parameter is not an atom"):
        run("((lambda.(((a.b).nil).t)).(t.nil))", env)


def test_lambda_evaluates_each_argument_once_before_the_body(env):
    calls = []

    def counting(expr, e):
        calls.append(str(expr))
        return evaluate(expr, e)

    rest = read("((x.(y.nil)).(quote.z))")
    args = read("((quote.a).((quote.b).nil))")
    assert apply_lambda(rest, args, env, counting) == Atom("z")
    assert calls == ["(quote.a)", "(quote.b)", "(quote.z)"]


def test_lambda_result_independent_of_parameter_use(env):
    unused = run("((lambda.((x.nil).(quote.same))).((quote.a).nil))", env)
    used = run("((lambda.((x.nil).(cond.((x.(quote.same)).nil)))).((quote.a).nil))", env)
    assert unused == used == Atom("same")


def test_unused_argument_is_still_evaluated(env):
    with pytest.raises(MinimaUnboundAtom):
        run("((lambda.((x.nil).(quote.z))).(undefined.nil))", env)


def test_evlis_left_to_right(env):
    seen = []

    def recording(expr, e):
        seen.append(expr)
        return evaluate(expr, e)

    result = evlis(read("((quote.a).((quote.b).((quote.c).nil)))"), env, recording)
    assert str(result) == "(a.(b.(c.nil)))"
    assert [str(x) for x in seen] == ["(quote.a)", "(quote.b)", "(quote.c)"]


def test_procedure_bound_in_environment(env):
    env = from_mapping({"swap": read("(lambda.((x.(y.nil)).(cons.(y.x))))")}, env)
    assert str(run("(swap.((quote.a).((quote.b).nil)))", env)) == "(b.a)"


# ------------------ label ------------------

def test_label_constant_procedure(env):
    source = "((label.(f.(lambda.((x.nil).(quote.x))))).(nil.nil))"
    assert run(source, env) == Atom("x")


def test_label_recursion(env):
    # first atom: descend through car until an atom is reached
    ff = (
        "(lambda.((x.nil)."
        "(cond.(((atom.x).x).((t.(ff.((car.x).nil))).nil)))))"
    )
    source = f"((label.(ff.{ff})).((quote.((a.b).c)).nil))"
    assert run(source, env) == Atom("a")


def test_label_binding_is_scoped_to_the_call(env):
    run("((label.(f.(lambda.(nil.(quote.x))))).nil)", env)
    with pytest.raises(MinimaUnboundAtom, match="undefined atom: f"):
        run("(f.nil)", env)


def test_label_name_must_be_atom(env):
    with pytest.raises(MinimaTypeError, match="non-atom as label"):
        run("((label.((a.b).(lambda.(nil.t)))).nil)", env)


def test_label_cannot_rebind_primitive(env):
    with pytest.raises(MinimaTypeError, match="cannot label primitive car"):
        run("((label.(car.(lambda.(nil.(quote.x))))).nil)", env)


def test_malformed_lambda(env):
    with pytest.raises(MinimaTypeError, match="malformed lambda"):
        run("((lambda.x).nil)", env)


def test_runaway_recursion_is_not_caught(env):
    source = "((label.(f.(lambda.(nil.(f.nil))))).nil)"
    with pytest.raises(RecursionError):
        run(source, env)


# ------------------ procedure values ------------------

def test_bare_lambda_is_its_own_value(env):
    source = "(lambda.((x.nil).x))"
    assert run(source, env) == read(source)


def test_bare_label_is_its_own_value(env):
    source = "(label.(f.(lambda.((x.nil).x))))"
    assert run(source, env) == read(source)


def test_procedure_value_can_be_applied_later(env):
    # twice-applied identity: f is bound to the evaluated lambda form
    source = (
        "((lambda.((f.nil).(f.((f.((quote.a).nil)).nil))))."
        "((lambda.((x.nil).x)).nil))"
    )
    assert run(source, env) == Atom("a")


def test_label_value_recurses_when_applied(env):
    ff = "(lambda.((x.nil).(cond.(((atom.x).x).((t.(ff.((car.x).nil))).nil)))))"
    source = f"((lambda.((g.nil).(g.((quote.((a.b).c)).nil)))).((label.(ff.{ff})).nil))"
    assert run(source, env) == Atom("a")


@pytest.mark.parametrize(
    "source,message",
    [
        ("(lambda.x)", "malformed lambda"),
        ("(label.f)", "malformed label"),
        ("(label.((a.b).(lambda.(nil.t))))", "non-atom as label"),
        ("(label.(car.(lambda.(nil.t))))", "cannot label primitive car"),
    ]
)
def test_malformed_procedure_values(source, message, env):
    with pytest.raises(MinimaTypeError, match=message):
        run(source, env)
