"""Lotka-Volterra predator-prey network, written with the loose formatting
the text format tolerates: inline comments, trailing commas and source/sink
reactions."""

from crnparse import parse

text = """\
// prey reproduce
Prey => 2 Prey, 10,
// predators eat prey
Prey + Predator => 2 Predator, 1 // mass action
Predator => NULL, 10,,,

NULL => Prey, 1  // immigration

Prey, 1000,
Predator, 100
"""

document = parse(text, name=__name__)
