from .forms import (
    FormPrimitive,
    CirclePrimitive,
    RectanglePrimitive,
    PolygonPrimitive,
    Form,
    circle,
    rectangle,
    polygon,
)
from .properties import (
    PropertyPrimitive,
    FillPrimitive,
    StrokePrimitive,
    LineWidthPrimitive,
    FillOpacityPrimitive,
    StrokeOpacityPrimitive,
    Property,
    fill,
    stroke,
    linewidth,
    fill_opacity,
    stroke_opacity,
)
from .context import Context, compose, context, flatten_draw_set, resolve_properties
from .config import BatchingConfig, get_batching_config, set_batching_config
from .batch import FormBatch, try_batch, filter_redundant_offsets, register_batcher
from .optimize import count_unique_primitives, excise_vector_children, optimize_batching
from .validate import validate_context, ValidationError
from .render import BatchDrawOp, ShapeDrawOp, build_display_list, count_drawn_primitives
from .svg_codegen import generate_svg_code, generate_svg_document
from .demo import scatter_scene

__all__ = [
    'FormPrimitive',
    'CirclePrimitive',
    'RectanglePrimitive',
    'PolygonPrimitive',
    'Form',
    'circle',
    'rectangle',
    'polygon',
    'PropertyPrimitive',
    'FillPrimitive',
    'StrokePrimitive',
    'LineWidthPrimitive',
    'FillOpacityPrimitive',
    'StrokeOpacityPrimitive',
    'Property',
    'fill',
    'stroke',
    'linewidth',
    'fill_opacity',
    'stroke_opacity',
    'Context',
    'compose',
    'context',
    'flatten_draw_set',
    'resolve_properties',
    'BatchingConfig',
    'get_batching_config',
    'set_batching_config',
    'FormBatch',
    'try_batch',
    'filter_redundant_offsets',
    'register_batcher',
    'count_unique_primitives',
    'excise_vector_children',
    'optimize_batching',
    'validate_context',
    'ValidationError',
    'BatchDrawOp',
    'ShapeDrawOp',
    'build_display_list',
    'count_drawn_primitives',
    'generate_svg_code',
    'generate_svg_document',
    'scatter_scene',
]
