#############################################
# Model an n x n chessboard as n*n Boolean  #
# variables and post the n-queens rules     #
#############################################

from collections import defaultdict
from boolqueens.core import Environment, IncompleteAssignmentError, \
    InvalidSizeError


def cell_name(r, c):
    'Return the variable name of the cell at row r, column c.'
    return 'x[%d][%d]' % (r, c)


def diagonals(n, direction):
    r'''Return every diagonal of an n x n board as a list of (row, col)
    lists.  A "\" diagonal holds the cells with a constant row - col; a "/"
    diagonal holds the cells with a constant row + col.  Each direction has
    2n-1 diagonals, and every cell lies on exactly one of them.'''
    if direction == '\\':
        key = lambda r, c: r - c
    elif direction == '/':
        key = lambda r, c: r + c
    else:
        raise ValueError('diagonal direction must be "\\" or "/", not %s' %
                         repr(direction))
    groups = defaultdict(list)
    for r in range(n):
        for c in range(n):
            groups[key(r, c)].append((r, c))
    return [groups[k] for k in sorted(groups)]


class BoardModel(object):
    '''The n-queens problem on an n x n board, with one 0/1 variable per
    cell.  A variable is 1 if and only if a queen occupies its cell.'''

    def __init__(self, n, env=None):
        if n < 0:
            raise InvalidSizeError(n)
        self.size = n
        if env is None:
            env = Environment()
        self.env = env

        # Define an nxn chessboard.
        self.cells = [[env.register_var(cell_name(r, c)) for c in range(n)]
                      for r in range(n)]

        # Ensure that exactly one queen lies in each row and in each column.
        for row in self.rows():
            env.exactly(row, 1)
        for col in self.columns():
            env.exactly(col, 1)

        # Limit diagonals to either zero or one queen.
        for diag in self.diagonals():
            env.at_most(diag, 1)

    def rows(self):
        'Return the variables of each row.'
        return [list(row) for row in self.cells]

    def columns(self):
        'Return the variables of each column.'
        n = self.size
        return [[self.cells[r][c] for r in range(n)] for c in range(n)]

    def diagonals(self):
        'Return the variables of every diagonal in both directions.'
        return [[self.cells[r][c] for r, c in diag]
                for direction in ('\\', '/')
                for diag in diagonals(self.size, direction)]

    def select_branching(self, var='rnd', val='rnd', seed=1, rng=None):
        '''Choose how the search picks the next cell to assign and which
        value it tries first.  The default picks both at random from a
        generator seeded with 1, so repeated runs explore the board in the
        same order.'''
        return self.env.branch(var, val, seed, rng)

    def solve(self, limit=1, callback=None, search=None, **kwargs):
        'Search for up to limit placements (None or 0 for all of them).'
        return self.env.solve(search, limit=limit, callback=callback,
                              **kwargs)

    def _values(self, assignment):
        'Map the assignment onto a grid of integers.'
        unbound = [v for row in self.cells for v in row
                   if assignment.get(v) is None]
        if len(unbound) > 0:
            raise IncompleteAssignmentError(unbound)
        return [[int(assignment[v]) for v in row] for row in self.cells]

    def queens(self, assignment):
        'Return the (row, col) coordinates of every queen in an assignment.'
        return [(r, c)
                for r, row in enumerate(self._values(assignment))
                for c, val in enumerate(row)
                if val]

    def render(self, assignment):
        '''Render a complete assignment as text, one line per row and each
        cell right-aligned to width 2 followed by two spaces.'''
        return '\n'.join([''.join(['%2d  ' % val for val in row])
                          for row in self._values(assignment)])
