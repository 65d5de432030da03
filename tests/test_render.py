from collections import Counter

from sceneopt.config import BatchingConfig
from sceneopt.context import context, flatten_draw_set, style_key
from sceneopt.forms import CirclePrimitive, circle, rectangle
from sceneopt.properties import fill, linewidth
from sceneopt.render import BatchDrawOp, ShapeDrawOp, build_display_list, count_drawn_primitives


def _scene(n=300):
    return context(
        linewidth(0.1),
        context(
            circle([float(i) for i in range(n)], 1.0, 0.5),
            fill(['red', 'blue', 'green'] * (n // 3)),
        ),
    )


def _expand(ops):
    items = []
    for op in ops:
        if isinstance(op, BatchDrawOp):
            for x, y in op.batch.offsets:
                prim = CirclePrimitive((x, y), op.batch.primitive.radius)
                items.append((prim, style_key(op.style)))
        else:
            items.append((op.primitive, style_key(op.style)))
    return items


def test_split_contexts_are_drawn_as_batches():
    ops = build_display_list(_scene())

    assert len(ops) == 3
    assert all(isinstance(op, BatchDrawOp) for op in ops)
    assert [op.style['fill'].color for op in ops] == ['red', 'blue', 'green']
    assert count_drawn_primitives(ops) == 300


def test_display_list_draws_the_same_primitives():
    scene = _scene()

    ops = build_display_list(scene)

    assert Counter(_expand(ops)) == Counter(flatten_draw_set(scene))


def test_without_optimization_vector_styles_prevent_batching():
    ops = build_display_list(_scene(), optimize=False)

    assert len(ops) == 300
    assert all(isinstance(op, ShapeDrawOp) for op in ops)


def test_scalar_styled_vector_form_batches_without_splitting():
    ops = build_display_list(context(circle([0, 1, 2], 0, 1), fill('red')))

    assert len(ops) == 1
    assert ops[0].batch.offsets == ((0.0, 0.0), (1.0, 0.0), (2.0, 0.0))


def test_unbatchable_forms_fall_back_to_shapes():
    ops = build_display_list(context(circle([0, 1], 0, [1, 2]), rectangle([0, 1], 0, 1, 1)))

    assert len(ops) == 4
    assert all(isinstance(op, ShapeDrawOp) for op in ops)


def test_batch_flag_disables_batching():
    ops = build_display_list(context(circle([0, 1, 2], 0, 1)), batch=False)

    assert len(ops) == 3


def test_filter_offsets_config_drops_duplicates():
    scene = context(circle([0.0, 0.01, 5.0], 0, 1))

    ops = build_display_list(scene, config=BatchingConfig(filter_offsets=True))

    assert ops[0].batch.offsets == ((0.0, 0.0), (5.0, 0.0))


def test_display_list_does_not_modify_scene():
    scene = _scene()
    before = flatten_draw_set(scene)

    build_display_list(scene)
    build_display_list(scene)

    assert flatten_draw_set(scene) == before
    assert len(scene.container_children) == 1
