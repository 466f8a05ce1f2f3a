##################################
# Command-line driver: place n   #
# queens on an n x n board       #
##################################

import argparse
import sys
import boolqueens


def parse_args(argv=None):
    'Parse the command line.'
    parser = argparse.ArgumentParser(
        prog='boolqueens',
        description='Solve the n-queens problem with one 0/1 variable per '
                    'square.')
    parser.add_argument('size', type=int, nargs='?', default=9, metavar='INT',
                        help='Size of the board (default: 9)')
    parser.add_argument('--solutions', '-n', type=int, default=1,
                        metavar='INT',
                        help='Number of solutions to print; 0 for all '
                             '(default: 1)')
    parser.add_argument('--search', '-s', choices=['dfs', 'z3'],
                        help='Search driver (default: %s)' %
                        boolqueens.search_name())
    parser.add_argument('--seed', type=int, default=1, metavar='INT',
                        help='Seed for random branching (default: 1)')
    return parser.parse_args(argv)


def summary(result):
    'Return a summary of the search statistics.'
    lines = ['Summary',
             '\truntime:      %.3f s' % result.runtime(),
             '\tsolutions:    %d' % len(result.solutions),
             '\tnodes:        %d' % result.nodes,
             '\tfailures:     %d' % result.failures,
             '\tpeak depth:   %d' % result.peak_depth]
    return '\n'.join(lines)


def main(argv=None):
    'Place queens and print every solution found.'
    cl_args = parse_args(argv)
    if cl_args.solutions < 0:
        sys.exit('%s: the number of solutions must be non-negative' %
                 sys.argv[0])
    try:
        board = boolqueens.BoardModel(cl_args.size)
    except boolqueens.InvalidSizeError as e:
        sys.exit('%s: %s' % (sys.argv[0], e))
    board.select_branching('rnd', 'rnd', cl_args.seed)

    def show(soln):
        for line in board.render(soln).split('\n'):
            print('\t' + line)
        print('')

    print('NQueens')
    result = board.solve(limit=cl_args.solutions, callback=show,
                         search=cl_args.search)
    print(summary(result))
    return 0


if __name__ == '__main__':
    sys.exit(main())
