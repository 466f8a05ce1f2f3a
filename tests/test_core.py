import pytest

import boolqueens


@pytest.fixture()
def abc_env():
    env = boolqueens.Environment()
    a = env.register_var("a")
    b = env.register_var("b")
    c = env.register_var("c")
    return env, [a, b, c]


def test_register_duplicate(abc_env):
    env, _ = abc_env
    with pytest.raises(boolqueens.DuplicateVariableError) as excinfo:
        env.register_var("b")
    assert excinfo.value.bad_var == "b"


def test_unknown_variable(abc_env):
    env, vs = abc_env
    with pytest.raises(boolqueens.UnknownVariableError) as excinfo:
        env.exactly(vs + ["d"], 1)
    assert excinfo.value.bad_var == "d"
    assert env.constraints() == ()


def test_bool_array():
    env = boolqueens.Environment()
    assert env.bool_array("q", 3) == ["q[0]", "q[1]", "q[2]"]
    assert env.variables() == ["q[0]", "q[1]", "q[2]"]


def test_negative_count(abc_env):
    env, vs = abc_env
    with pytest.raises(ValueError):
        env.exactly(vs, -1)
    with pytest.raises(ValueError):
        env.at_most(vs, -1)


def test_constraint_kinds(abc_env):
    env, vs = abc_env
    exact = env.exactly(vs, 2)
    at_most = env.at_most(vs, 2)
    other = env.nck(vs, {0, 2})
    assert exact.num_true == {2}
    assert at_most.num_true == {0, 1, 2}
    assert exact.at_most_bound() is None
    assert at_most.at_most_bound() == 2
    assert other.at_most_bound() is None
    assert str(other) == "['a', 'b', 'c'] choose [0, 2]"
    assert env.constraints() == (exact, at_most, other)


@pytest.mark.parametrize("search", ["dfs", "z3"])
@pytest.mark.parametrize(
    "counts,expected",
    [
        ({1}, 3),
        ({0, 1}, 4),
        ({0, 2}, 4),
        ({3}, 1),
        ({4}, 0),
    ],
)
def test_nck_enumeration(abc_env, search, counts, expected):
    env, vs = abc_env
    env.nck(vs, counts)
    result = env.solve(search, limit=None)
    assert len(result.solutions) == expected
    for soln in result.solutions:
        assert sum(soln.values()) in counts
        assert env.valid(soln)


@pytest.mark.parametrize("search", ["dfs", "z3"])
def test_empty_constraint(search):
    env = boolqueens.Environment()
    env.exactly([], 0)
    assert len(env.solve(search, limit=None).solutions) == 1
    env.exactly([], 1)
    assert len(env.solve(search, limit=None).solutions) == 0


def test_validation(abc_env):
    env, vs = abc_env
    one = env.exactly(vs, 1)
    none = env.at_most(vs[:2], 0)
    result = env.validation({"a": False, "b": False, "c": True})
    assert result.passed == [one, none]
    assert result.failed == []
    result = env.validation({"a": True, "b": False, "c": False})
    assert result.passed == [one]
    assert result.failed == [none]
    assert not env.valid({"a": True, "b": False, "c": False})
    with pytest.raises(boolqueens.IncompleteAssignmentError):
        env.valid({"a": True, "b": None})


def test_params_from_environment(monkeypatch):
    board = boolqueens.BoardModel(4)
    monkeypatch.setenv("BOOLQUEENS_PARAMS", "limit=0 seed=3")
    result = board.env.solve()
    assert len(result.solutions) == 2
    assert result.branching.seed == 3

    # Explicit keyword arguments win over the environment variable.
    result = board.env.solve(limit=1)
    assert len(result.solutions) == 1


def test_parse_params():
    params = boolqueens.core._parse_params(
        "limit=3 scale=0.5 name='a b' flag")
    assert params == {"limit": 3, "scale": 0.5, "name": "a b", "flag": True}


def test_unknown_search():
    with pytest.raises(ValueError):
        boolqueens._name_to_search("gecode")
    env = boolqueens.Environment()
    with pytest.raises(ValueError):
        env.solve("gecode")


def test_negative_limit(abc_env):
    env, _ = abc_env
    with pytest.raises(ValueError):
        env.solve("dfs", limit=-1)


def test_result_summary():
    board = boolqueens.BoardModel(4)
    result = board.solve(limit=None)
    summary = result._str_dict()
    assert summary["number of variables"] == 16
    assert summary["number of solutions"] == 2
    assert summary["failures"] == result.failures
    assert "number of solutions" in str(result)
    assert repr(result).startswith("boolqueens.search.Result(")
    assert result.runtime() >= 0.0


if __name__ == "__main__":
    pytest.main(["-v", __file__])
