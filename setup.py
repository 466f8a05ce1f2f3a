######################
# Install boolqueens #
######################

import setuptools

long_description = ('boolqueens models the n-queens puzzle with one 0/1 '
                    'variable per square, posts row, column, and diagonal '
                    'cardinality constraints, and enumerates placements '
                    'with a seeded depth-first search backed by the Z3 '
                    'theorem prover.')

setuptools.setup(
    name='boolqueens',
    version='1.0.0',
    description='N-queens as n*n Boolean cardinality constraints',
    long_description=long_description,
    long_description_content_type='text/markdown',
    classifiers=[
        'Topic :: Software Development :: Libraries :: Python Modules',
        'Topic :: Scientific/Engineering :: Mathematics',
        'Development Status :: 3 - Alpha',
        'Programming Language :: Python :: 3',
        'Operating System :: OS Independent',
        'Intended Audience :: Education'],
    keywords=[
        'constraint programming',
        'n-queens',
        'cardinality constraints'],
    python_requires='>=3.8',
    install_requires=[
        'z3-solver >= 4.8',
    ],
    extras_require={
        'test': ['pytest'],
    },
    packages=setuptools.find_packages(exclude=['tests']),
    scripts=['bin/boolqueens'])
