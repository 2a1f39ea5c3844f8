""" Schlogl model

Schlogl, F., 1972. Chemical reaction models for non-equilibrium phase
transitions. Zeitschrift für physik, 253(2), pp.147-161.

https://link.springer.com/article/10.1007/BF01379769

Both reversible rules are written as forward/backward reaction pairs, with
rates rounded to integers.
"""

from crnparse import parse

text = """\
2 X => 3 X, 30
3 X => 2 X, 1
I => X + I, 200
X + I => I, 4

X, 100
I, 1
"""

document = parse(text, name=__name__)
