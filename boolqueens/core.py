#####################################
# boolqueens constraint environment #
#####################################

import boolqueens
import os
import random
import shlex


class UnknownVariableError(Exception):
    'An unknown variable was referenced.'

    def __init__(self, var_name):
        self.bad_var = var_name
        msg = 'No variable named "%s" exists in the environment' % var_name
        super().__init__(msg)


class DuplicateVariableError(Exception):
    'A supposedly new variable already exists.'

    def __init__(self, var_name):
        self.bad_var = var_name
        msg = 'Variable "%s" already exists in the environment' % var_name
        super().__init__(msg)


class InvalidSizeError(ValueError):
    'A board was requested with a negative size.'

    def __init__(self, size):
        self.bad_size = size
        msg = 'Board size must be non-negative, not %s' % repr(size)
        super().__init__(msg)


class IncompleteAssignmentError(Exception):
    'An assignment leaves at least one variable unbound.'

    def __init__(self, var_names):
        self.unbound = list(var_names)
        shown = ', '.join(self.unbound[:5])
        if len(self.unbound) > 5:
            shown += ', ...'
        msg = '%d variable(s) are unbound: %s' % (len(self.unbound), shown)
        super().__init__(msg)


class UnknownStrategyError(ValueError):
    'A branching policy name was not recognized.'

    def __init__(self, kind, name, known):
        self.bad_strategy = name
        msg = '"%s" is not a recognized %s-selection policy (expected %s)' % \
            (name, kind, ', '.join(known))
        super().__init__(msg)


class Constraint(object):
    'Representation of a constraint (k of n variables are 1).'

    def __init__(self, var_list, num_true):
        self.var_list = list(var_list)   # Variables; can include duplicates
        self.num_true = set(num_true)    # Set of allowable counts of 1s

    def __str__(self):
        'Return a constraint as a string.'
        return '%s choose %s' % (self.var_list, sorted(self.num_true))

    def at_most_bound(self):
        '''Return k if the constraint allows exactly the counts 0 to k,
        otherwise None.'''
        if len(self.num_true) == 0:
            return None
        k = max(self.num_true)
        if self.num_true == set(range(k + 1)):
            return k
        return None

    def holds(self, soln):
        'Return True if the given solution satisfies the constraint.'
        return sum([int(soln[v]) for v in self.var_list]) in self.num_true


class Branching(object):
    '''Policy for choosing the next variable to assign and the order in
    which its values are tried.'''

    VAR_POLICIES = ('none', 'rnd')
    VAL_POLICIES = ('min', 'max', 'rnd')

    def __init__(self, var='rnd', val='rnd', seed=1, rng=None):
        if var not in self.VAR_POLICIES:
            raise UnknownStrategyError('variable', var, self.VAR_POLICIES)
        if val not in self.VAL_POLICIES:
            raise UnknownStrategyError('value', val, self.VAL_POLICIES)
        self.var = var
        self.val = val
        self.seed = seed
        self._rng = rng   # Caller-supplied random source, if any

    def __str__(self):
        return 'var=%s val=%s seed=%s' % (self.var, self.val, self.seed)

    def random_source(self):
        '''Return the random source for one search.  Without an injected
        source, every search starts from a freshly seeded generator.'''
        if self._rng is not None:
            return self._rng
        return random.Random(self.seed)

    def select_var(self, unbound, rng):
        'Pick the next variable to branch on from a list of unbound ones.'
        if self.var == 'none':
            return unbound[0]
        return unbound[rng.randrange(len(unbound))]

    def order_values(self, rng):
        'Return the values 0 and 1 in the order they should be tried.'
        if self.val == 'min':
            return [0, 1]
        if self.val == 'max':
            return [1, 0]
        first = rng.randrange(2)
        return [first, 1 - first]


def _parse_params(var_params):
    'Parse shell-quoted "key=value" pairs into a dictionary.'
    params = {}
    for t in shlex.split(var_params):
        try:
            # Parse "key=value" into a key and a value.
            eq = t.index('=')
            k, v = t[:eq], t[eq+1:]

            # Attempt to convert value to a number.
            try:
                v = int(v)
            except ValueError:
                try:
                    v = float(v)
                except ValueError:
                    pass
        except ValueError:
            k, v = t, True
        params[k] = v
    return params


class Environment(object):
    'A namespace for a set of Boolean variables and their constraints.'

    def __init__(self):
        'Instantiate an empty set of variables and constraints.'
        self._constraints = []    # All constraints, in posting order
        self._var_names = []      # All variable names, in declaration order
        self._var_set = set()     # Same as _var_names, for fast lookup
        self.branching = Branching()

    def register_var(self, var_name):
        '''Register a new Boolean variable with domain {0, 1}.  Return the
        name unmodified.'''
        if var_name in self._var_set:
            raise DuplicateVariableError(var_name)
        self._var_set.add(var_name)
        self._var_names.append(var_name)
        return var_name

    def bool_array(self, prefix, count):
        'Register count Boolean variables named prefix[0], prefix[1], ...'
        return [self.register_var('%s[%d]' % (prefix, i))
                for i in range(count)]

    def _check_vars(self, vs):
        for v in vs:
            if v not in self._var_set:
                raise UnknownVariableError(v)

    def nck(self, vs, vals):
        '''Add a constraint that the number of variables equal to 1 lies in
        the given set of values.'''
        vs = list(vs)
        self._check_vars(vs)
        c = Constraint(vs, vals)
        self._constraints.append(c)
        return c

    def exactly(self, vs, k):
        'Declare that exactly k of the given variables equal 1.'
        if k < 0:
            raise ValueError('exactly() requires a non-negative count')
        return self.nck(vs, {k})

    def at_most(self, vs, k):
        'Declare that at most k of the given variables equal 1.'
        if k < 0:
            raise ValueError('at_most() requires a non-negative count')
        return self.nck(vs, range(k + 1))

    def branch(self, var='rnd', val='rnd', seed=1, rng=None):
        'Configure the branching policy used by searches of this environment.'
        self.branching = Branching(var, val, seed, rng)
        return self.branching

    def __str__(self):
        'Return an environment as a single string.'
        vstr = ', '.join(self._var_names)
        cstr = ', '.join([str(c) for c in self._constraints])
        return 'Variables {%s} with constraints {%s}' % (vstr, cstr)

    def variables(self):
        'Return a list of all variable names in declaration order.'
        return list(self._var_names)

    def constraints(self):
        'Return a tuple of all constraints in posting order.'
        # Search drivers rely on a stable order to be reproducible.
        return tuple(self._constraints)

    def solve(self, search=None, *args, **kwargs):
        'Search for solutions that satisfy all constraints in the environment.'
        # Parse key=value pairs in the BOOLQUEENS_PARAMS environment variable.
        all_kwargs = {}
        var_params = os.getenv('BOOLQUEENS_PARAMS')
        if var_params is not None:
            all_kwargs = _parse_params(var_params)

        # Invoke the search driver.
        all_kwargs.update(**kwargs)
        search_func = boolqueens.search_func
        if search is not None:
            search_func = boolqueens._name_to_search(search)
        return search_func(self, *args, **all_kwargs)

    class Validation(object):
        'Encapsulate the status of a validation check.'

        def __init__(self):
            self.passed = []
            self.failed = []

    def validation(self, soln):
        '''Return a Validation object that partitions constraints based on
        their pass/fail status.'''
        unbound = [v for v in self._var_names if soln.get(v) is None]
        if len(unbound) > 0:
            raise IncompleteAssignmentError(unbound)
        result = self.Validation()
        for c in self._constraints:
            if c.holds(soln):
                result.passed.append(c)
            else:
                result.failed.append(c)
        return result

    def valid(self, soln):
        'Return True if all constraints are satisfied, False otherwise.'
        raw = self.validation(soln)
        return len(raw.failed) == 0
