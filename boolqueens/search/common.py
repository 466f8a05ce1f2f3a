#########################################
# Define classes and functions that are #
# common across multiple search drivers #
#########################################

import datetime
import z3


def z3_vars(env, ctx=None):
    'Map each variable in an environment to a Z3 Boolean.'
    return {v: z3.Bool(v, ctx) for v in env.variables()}


def z3_constraint(c, zvars, ctx=None):
    'Express a single cardinality constraint in Z3.'
    terms = [(zvars[v], 1) for v in c.var_list]
    if len(terms) == 0:
        # Zero variables are 1, so only a count of 0 can hold.
        return z3.BoolVal(0 in c.num_true, ctx)
    k = c.at_most_bound()
    if k is not None:
        # At most k
        return z3.PbLe(terms, k)
    if len(c.num_true) == 1:
        # Exactly k
        return z3.PbEq(terms, list(c.num_true)[0])
    # Any of several k values
    return z3.Or([z3.PbEq(terms, nt) for nt in sorted(c.num_true)])


def z3_solver(env, seed=None):
    '''Return a Z3 solver holding every constraint in an environment, plus
    the map from variable names to Z3 Booleans.  Each solver gets its own
    Z3 context so that no state carries over from earlier searches.'''
    ctx = z3.Context()
    s = z3.Solver(ctx=ctx)
    if seed is not None:
        s.set('random_seed', seed)
    zvars = z3_vars(env, ctx)
    for c in env.constraints():
        s.add(z3_constraint(c, zvars, ctx))
    return s, zvars


def collect(ret, solutions, limit=1, callback=None):
    '''Draw up to limit solutions (all if limit is None or 0) from an
    iterator, invoking callback on each, and record them in a Result.'''
    if limit is not None and limit < 0:
        raise ValueError('the solution limit must be non-negative')
    ret.solutions = []
    stime1 = datetime.datetime.now()
    try:
        for soln in solutions:
            ret.solutions.append(soln)
            if callback is not None:
                callback(soln)
            if limit and len(ret.solutions) >= limit:
                break
    finally:
        solutions.close()
    stime2 = datetime.datetime.now()
    ret.solver_times = (stime1, stime2)
    return ret


class Result():
    'Encapsulate search results and related data.'

    def __init__(self):
        self.variables = None
        self.solutions = None
        self.branching = None
        self.nodes = 0
        self.failures = 0
        self.peak_depth = 0
        self.solver_times = None

    @property
    def satisfiable(self):
        'True if at least one solution was found.'
        return bool(self.solutions)

    def _repr_dict(self):
        'Return a dictionary for use internally by __repr__.'
        ret = {}
        if self.variables:
            ret["variables"] = self.variables
        if self.solutions:
            ret["solutions"] = self.solutions
        if self.branching:
            ret["branching"] = str(self.branching)
        ret["nodes"] = self.nodes
        ret["failures"] = self.failures
        ret["peak depth"] = self.peak_depth
        if self.solver_times:
            ret["solver times"] = self.solver_times
        return ret

    def __repr__(self):
        ret = self._repr_dict()
        return 'boolqueens.search.Result(%s)' % str(ret)

    def _str_dict(self):
        'Return a dictionary for use internally by __str__.'
        ret = {}
        if self.variables:
            ret["number of variables"] = len(self.variables)
        if self.solutions:
            ret["top solution"] = self.solutions[0]
        ret["number of solutions"] = len(self.solutions or [])
        ret["nodes"] = self.nodes
        ret["failures"] = self.failures
        ret["peak depth"] = self.peak_depth
        if self.solver_times:
            ret["solver times"] = \
                (self.solver_times[0].strftime("%Y-%m-%d %H:%M:%S.%f"),
                 self.solver_times[1].strftime("%Y-%m-%d %H:%M:%S.%f"))
        return ret

    def __str__(self):
        ret = self._str_dict()
        return str(ret)

    def runtime(self):
        'Return the search time in seconds.'
        if self.solver_times is None:
            return 0.0
        return (self.solver_times[1] - self.solver_times[0]).total_seconds()
