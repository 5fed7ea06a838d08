from .hyperplanes import HyperplaneOrbit, enumerate_hyperplanes
from .ridges import RidgeOrbitRegistry, canonical_key
from .search import (
    FacetType,
    FacetCandidate,
    CoverageTable,
    ridge_coverage,
    classify_coverage,
    search_facet_combinations,
)
from .assemble import expand_facets, assemble_ranks, build_faceting
from .subdim import Faceting, SubFaceting, faceting_subdim
from .core import faceting

__all__ = [
    "HyperplaneOrbit",
    "enumerate_hyperplanes",
    "RidgeOrbitRegistry",
    "canonical_key",
    "FacetType",
    "FacetCandidate",
    "CoverageTable",
    "ridge_coverage",
    "classify_coverage",
    "search_facet_combinations",
    "expand_facets",
    "assemble_ranks",
    "build_faceting",
    "Faceting",
    "SubFaceting",
    "faceting_subdim",
    "faceting",
]
