from .draw import draw_faceting, draw_facetings

__all__ = [
    "draw_faceting",
    "draw_facetings",
]
