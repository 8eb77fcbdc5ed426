"""Waygeom - line geometry construction and segmentation library.

This library builds linestring geometries from ways (ordered node
references) and re-nodes long lines into pieces of bounded length, on a
small tagged geometry value model with Shapely interoperability.
"""


# Geometry value model
from .geometry import (
    Point,
    Linestring,
    Multilinestring,
    Geometry,
    num_geometries,
    area,
    geometry_type,
    centroid,
    length,
    reverse,
    geometry_n,
)

# Linear-feature builder
from .build import (
    NodeRef,
    Way,
    LocationSource,
    create_point,
    create_linestring,
    create_linestrings,
)

# Segmentation
from .segmentize import segmentize

# Measurement
from .metrics import measure_geometry, max_member_length

# Shapely interoperability
from .interop import to_shapely, from_shapely

# Core types, configuration and exceptions
from .core import (
    GeometryType,
    SegmentizeConfig,
    DEFAULT_REL_TOLERANCE,
    WaygeomError,
    PreconditionError,
    GeometryTypeError,
    ConstructionWarning,
)

__all__ = [

    # Geometry value model
    'Point',
    'Linestring',
    'Multilinestring',
    'Geometry',
    'num_geometries',
    'area',
    'geometry_type',
    'centroid',
    'length',
    'reverse',
    'geometry_n',

    # Linear-feature builder
    'NodeRef',
    'Way',
    'LocationSource',
    'create_point',
    'create_linestring',
    'create_linestrings',

    # Segmentation
    'segmentize',

    # Measurement
    'measure_geometry',
    'max_member_length',

    # Shapely interoperability
    'to_shapely',
    'from_shapely',

    # Core types and configuration
    'GeometryType',
    'SegmentizeConfig',
    'DEFAULT_REL_TOLERANCE',

    # Core exceptions
    'WaygeomError',
    'PreconditionError',
    'GeometryTypeError',
    'ConstructionWarning',
]
