######################################
# Use the Z3 Theorem Prover directly #
# to enumerate the solutions of a    #
# boolqueens environment             #
######################################

import z3
from boolqueens.search.common import Result, collect, z3_solver


class Z3Result(Result):
    'Add Z3-specific fields to a Result.'

    def __init__(self):
        super().__init__()
        self.statistics = None

    def __repr__(self):
        ret = self._repr_dict()
        ret["Z3 statistics"] = self.statistics
        return 'boolqueens.search.Result(%s)' % str(ret)


def solutions(env, seed=None, ret=None):
    '''Enumerate the solutions of an environment by repeatedly asking Z3 for
    a model and then forbidding that model.'''
    if ret is None:
        ret = Z3Result()
    s, zvars = z3_solver(env, seed)
    while True:
        ret.nodes += 1
        if s.check() != z3.sat:
            ret.failures += 1
            break
        model = s.model()
        soln = {k: z3.is_true(model.eval(v, model_completion=True))
                for k, v in zvars.items()}
        ret.statistics = str(s.statistics())
        yield soln
        if len(zvars) == 0:
            # The empty assignment is the only solution.
            break

        # Block this solution and look for another.
        s.add(z3.Or([z3.Not(zvars[k]) if val else zvars[k]
                     for k, val in soln.items()]))


def solve(env, limit=1, callback=None, branching=None, seed=None):
    '''Solve for the variables in a given boolqueens environment.  Only the
    seed of the branching policy applies; Z3 chooses its own variable and
    value order.'''
    if branching is None:
        branching = env.branching
    if seed is None:
        seed = branching.seed
    ret = Z3Result()
    ret.variables = env.variables()
    ret.branching = branching
    return collect(ret, solutions(env, seed, ret), limit, callback)
