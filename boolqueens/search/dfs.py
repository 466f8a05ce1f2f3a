########################################
# Depth-first search over a boolqueens #
# environment, using Z3 to propagate   #
# and check each partial assignment    #
########################################

import z3
from boolqueens.core import Branching
from boolqueens.search.common import Result, collect, z3_solver


def solutions(env, branching=None, ret=None):
    '''Enumerate the solutions of an environment lazily, in the order
    dictated by the branching policy.  At each node the policy picks an
    unbound variable and the order of its values; a binding that Z3 reports
    as unsatisfiable is a failure and is undone.'''
    if branching is None:
        branching = env.branching
    if ret is None:
        ret = Result()
    order = env.variables()
    s, zvars = z3_solver(env)
    if s.check() != z3.sat:
        # The constraints alone are unsatisfiable.
        ret.failures += 1
        return
    if len(order) == 0:
        yield {}
        return
    rng = branching.random_source()
    bound = {}
    trail = []       # Per level: (variable, values not yet tried)
    selected = set()  # Variables on the trail

    def descend():
        unbound = [v for v in order if v not in selected]
        var = branching.select_var(unbound, rng)
        selected.add(var)
        trail.append((var, branching.order_values(rng)))
        ret.peak_depth = max(ret.peak_depth, len(trail))

    descend()
    while len(trail) > 0:
        var, vals = trail[-1]
        if var in bound:
            # Undo the previous value of this variable.
            s.pop()
            del bound[var]
        if len(vals) == 0:
            # Both values have been tried.
            trail.pop()
            selected.remove(var)
            continue
        val = vals.pop(0)
        ret.nodes += 1
        s.push()
        if val:
            s.add(zvars[var])
        else:
            s.add(z3.Not(zvars[var]))
        bound[var] = bool(val)
        if s.check() != z3.sat:
            ret.failures += 1
            continue
        if len(selected) == len(order):
            yield {v: bound[v] for v in order}
            continue
        descend()


def solve(env, limit=1, callback=None, branching=None, seed=None):
    '''Search depth-first for solutions to a given boolqueens environment.
    An explicit seed replaces the branching policy's seed and any random
    source injected into it.'''
    if branching is None:
        branching = env.branching
    if seed is not None:
        branching = Branching(branching.var, branching.val, seed)
    ret = Result()
    ret.variables = env.variables()
    ret.branching = branching
    return collect(ret, solutions(env, branching, ret), limit, callback)
