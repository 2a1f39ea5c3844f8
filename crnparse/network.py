"""
Reaction network views of a parsed document, for simulators.

Species are indexed in the order of :py:attr:`crnparse.core.Document.species`
(first appearance) and reactions in the order of
:py:attr:`crnparse.core.Document.reactions`. Every function here reads the
document only; nothing is merged back into it.
"""

import numpy as np
import scipy.sparse
import networkx as nx
import sympy
from crnparse.logging import get_logger


def _logger(document):
    return get_logger(__name__,
                      document=document if document.name is not None else None)


def _species_index(document):
    return {name: i for i, name in enumerate(document.species)}


_INT64 = np.iinfo(np.int64)


def _fits_int64(value):
    return _INT64.min <= value <= _INT64.max


def _net_stoichiometry(document):
    """Nonzero {(species, reaction): net change} as exact Python ints."""
    index = _species_index(document)
    net = {}
    for j, reaction in enumerate(document.reactions):
        for sign, terms in ((-1, reaction.reactants), (1, reaction.products)):
            for term in terms:
                key = (index[term.name], j)
                net[key] = net.get(key, 0) + sign * term.coefficient
    return {key: value for key, value in net.items() if value != 0}


def stoichiometry_matrix(document):
    """
    Return the stoichiometry matrix for the reaction network

    Returns
    -------
    scipy.sparse.csr_matrix
        int64 matrix of shape (species, reactions). Entry (i, j) is the net
        number of species i produced by one firing of reaction j.

    Raises
    ------
    ValueError
        If a net entry does not fit in int64. Use :func:`mass_action_odes`
        for exact arithmetic on such networks.
    """
    shape = (len(document.species), len(document.reactions))
    net = _net_stoichiometry(document)
    for (i, j), value in net.items():
        if not _fits_int64(value):
            raise ValueError('Stoichiometry of species "%s" in reaction %d '
                             '(%d) does not fit in a 64-bit integer' %
                             (document.species[i], j, value))
    sm = scipy.sparse.lil_matrix(shape, dtype=np.int64)
    for (i, j), value in net.items():
        sm[i, j] = value
    _logger(document).debug('Built %d x %d stoichiometry matrix', *sm.shape)
    return sm.tocsr()


def initial_counts(document):
    """
    Return the initial particle count of every species

    Species without a count record start at zero.

    Returns
    -------
    numpy.ndarray
        Vector aligned with ``document.species``. The dtype is int64, or
        object (exact Python ints) if any count is too large for int64.

    Raises
    ------
    ValueError
        If one species has more than one count record.
    """
    index = _species_index(document)
    seen = set()
    for sc in document.species_counts:
        if sc.name in seen:
            raise ValueError('Species "%s" has more than one initial count' %
                             sc.name)
        seen.add(sc.name)
    exact = all(_fits_int64(sc.count) for sc in document.species_counts)
    counts = np.zeros(len(index), dtype=np.int64 if exact else object)
    for sc in document.species_counts:
        counts[index[sc.name]] = sc.count
    return counts


def reaction_graph(document):
    """
    Return the species-reaction graph of the network

    Species nodes are keyed by name, reaction nodes by their integer
    position in ``document.reactions``. Reactant edges point from species to
    reaction and product edges from reaction to species; each edge carries
    the total ``stoichiometry`` of that species on that side.

    Returns
    -------
    networkx.DiGraph
    """
    g = nx.DiGraph()
    for name in document.species:
        g.add_node(name, bipartite=0, kind='species')
    for j, reaction in enumerate(document.reactions):
        g.add_node(j, bipartite=1, kind='reaction', rate=reaction.rate)
        for term in reaction.reactants:
            _add_stoichiometry(g, term.name, j, term.coefficient)
        for term in reaction.products:
            _add_stoichiometry(g, j, term.name, term.coefficient)
    return g


def _add_stoichiometry(g, source, target, coefficient):
    if g.has_edge(source, target):
        g[source][target]['stoichiometry'] += coefficient
    else:
        g.add_edge(source, target, stoichiometry=coefficient)


def mass_action_odes(document):
    """
    Return the deterministic mass-action rate equations

    Each reaction proceeds at ``rate * product(S ** coefficient)`` over its
    reactant terms, with one sympy Symbol per species name. Coefficients and
    rates of any size are kept exact.

    Returns
    -------
    list of sympy.Expr
        d[S]/dt for each species, aligned with ``document.species``.
    """
    species = [sympy.Symbol(name) for name in document.species]
    index = _species_index(document)
    fluxes = []
    for reaction in document.reactions:
        flux = sympy.Integer(reaction.rate)
        for term in reaction.reactants:
            flux *= species[index[term.name]] ** term.coefficient
        fluxes.append(flux)

    rows = [[] for _ in species]
    for (i, j), value in sorted(_net_stoichiometry(document).items()):
        rows[i].append(sympy.Integer(value) * fluxes[j])
    return [sympy.Add(*row) for row in rows]
