# Z3 helpers belong in common.py; importing the z3 driver rebinds the name
# "z3" in this package.
from boolqueens.search.common import Result, collect
