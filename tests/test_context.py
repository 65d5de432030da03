import numpy as np
import pytest

from sceneopt.batch import FormBatch
from sceneopt.context import Context, compose, context, flatten_draw_set, resolve_properties
from sceneopt.forms import CirclePrimitive, Form, PolygonPrimitive, circle, polygon, rectangle
from sceneopt.properties import FillPrimitive, LineWidthPrimitive, Property, fill, linewidth, stroke


def test_circle_broadcasts_cyclically():
    form = circle([0, 1, 2, 3], 5, [1, 2])

    assert len(form) == 4
    assert form.is_vector
    assert [prim.radius for prim in form] == [1.0, 2.0, 1.0, 2.0]
    assert form[3] == CirclePrimitive((3, 5), 2)


def test_scalar_arguments_build_a_scalar_form():
    form = circle(1, 2, 3)

    assert len(form) == 1
    assert not form.is_vector


def test_numpy_arrays_are_broadcast():
    form = rectangle(np.arange(3), 0.0, 1.0, np.array([2.0, 4.0, 6.0]))

    assert [prim.height for prim in form] == [2.0, 4.0, 6.0]


def test_polygon_accepts_single_and_vector():
    tri = [(0, 0), (1, 0), (0, 1)]

    assert len(polygon(tri)) == 1
    assert len(polygon([tri, tri])) == 2
    assert polygon(tri)[0] == PolygonPrimitive(((0.0, 0.0), (1.0, 0.0), (0.0, 1.0)))


@pytest.mark.parametrize(
    'build',
    [
        lambda: circle(0, 0, -1),
        lambda: circle(float('nan'), 0, 1),
        lambda: circle([], 0, 1),
        lambda: polygon([(0, 0), (1, 1)]),
        lambda: fill(''),
        lambda: Form([]),
    ],
)
def test_invalid_construction_raises_value_error(build):
    with pytest.raises(ValueError):
        build()


def test_arrays_reject_mixed_kinds():
    with pytest.raises(ValueError):
        Property([FillPrimitive('red'), LineWidthPrimitive(1.0)])


def test_primitives_have_structural_equality_and_hash():
    a = CirclePrimitive((1, 2), 3)
    b = CirclePrimitive((1.0, 2.0), 3.0)

    assert a == b
    assert hash(a) == hash(b)
    assert FillPrimitive('RED') == FillPrimitive('red')
    assert len({FillPrimitive('red'), FillPrimitive('red'), FillPrimitive('blue')}) == 2


def test_compose_appends_children_in_order():
    f1, f2 = circle(0, 0, 1), circle(1, 1, 1)
    p1 = fill('red')
    child = Context(tag='child')

    ctx = compose(Context(), f1, p1, child, f2)

    assert ctx.form_children == [f1, f2]
    assert ctx.property_children == [p1]
    assert ctx.container_children == [child]


def test_compose_rejects_form_batches():
    batch = FormBatch(CirclePrimitive((0, 0), 1), ((0.0, 0.0), (1.0, 1.0)))

    with pytest.raises(TypeError):
        compose(Context(), batch)


def test_copy_is_independent_of_original():
    f = circle(0, 0, 1)
    ctx = context(f, fill('red'), tag='root')

    dup = ctx.copy()
    dup.form_children.append(circle(1, 1, 1))
    dup.property_children.clear()

    assert ctx.form_children == [f]
    assert len(ctx.property_children) == 1
    assert dup.tag == 'root'
    assert dup.form_children[0] is f


def test_resolve_properties_separates_vector_properties():
    ctx = context(fill(['red', 'blue']), linewidth(0.5))

    style, vectors = resolve_properties(ctx, {'stroke': stroke('black')[0]})

    assert set(style) == {'stroke', 'linewidth'}
    assert [prop.kind for prop in vectors] == ['fill']


def test_flatten_inherits_and_overrides_styles():
    inner = context(circle(2, 2, 1), fill('green'))
    root = context(circle([0, 1], 0, 1), fill(['red', 'blue']), linewidth(0.2), inner)

    items = flatten_draw_set(root)

    assert items == [
        (CirclePrimitive((0, 0), 1), (FillPrimitive('red'), LineWidthPrimitive(0.2))),
        (CirclePrimitive((1, 0), 1), (FillPrimitive('blue'), LineWidthPrimitive(0.2))),
        (CirclePrimitive((2, 2), 1), (FillPrimitive('green'), LineWidthPrimitive(0.2))),
    ]


def test_count_contexts():
    root = context(context(context()), context())

    assert root.count_contexts() == 4
