from .polygon import (
    Vertex,
    Outline,
    polygon_area,
    line_intersection,
    rotate_point,
    midpoint,
    lerp,
    polygons_of,
    inset_outline,
    exterior_points,
)
from .hexagon import (
    HexagonVariant,
    CORNER_VARIANTS,
    hexagon_vertices,
    variant_outline,
    edge_midpoints,
)
