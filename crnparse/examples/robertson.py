"""A simple three-species chemical kinetics system known as "Robertson's
example", as presented in:

H. H. Robertson, The solution of a set of reaction rate equations, in Numerical
Analysis: An Introduction, J. Walsh, ed., Academic Press, 1966, pp. 178-182.

Rate constants are scaled to integers: the reaction network text format only
carries positive integer rates.
"""

from crnparse import parse

text = """\
// Robertson's example, rates scaled by 100
A => B, 4
2 B => B + C, 3000000000
B + C => A + C, 1000000

// The system is known to be stiff for A=1, B=0, C=0
A, 1
"""

document = parse(text, name=__name__)
