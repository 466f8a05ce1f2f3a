# Load the core boolqueens functionality.
from boolqueens.core import *
from boolqueens.board import BoardModel, diagonals
import os


def _name_to_search(name):
    '''Map a search-driver name to an appropriate solve function.  Raise a
    ValueError if the name is not recognized.'''
    if name == 'dfs':
        import boolqueens.search.dfs
        return boolqueens.search.dfs.solve
    elif name == 'z3':
        import boolqueens.search.z3
        return boolqueens.search.z3.solve
    else:
        raise ValueError('"%s" is not a recognized boolqueens search' % name)


# Load a search driver based on the setting of the BOOLQUEENS_SEARCH
# environment variable.
_search_name = os.getenv('BOOLQUEENS_SEARCH')
if _search_name is None:
    _search_name = 'dfs'
search_func = _name_to_search(_search_name)


def search_name():
    'Return the name of the search driver being used.'
    return _search_name
