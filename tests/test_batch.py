import pytest

from sceneopt.batch import FormBatch, filter_redundant_offsets, try_batch
from sceneopt.config import BatchingConfig
from sceneopt.forms import CirclePrimitive, PolygonPrimitive, RectanglePrimitive, circle


def test_equal_radius_circles_batch_to_template_and_centers():
    centers = [(0.0, 0.0), (1.5, 2.0), (-3.0, 4.0), (10.0, 10.0)]
    circles = [CirclePrimitive(c, 5) for c in centers]

    result = try_batch(circles)

    assert result is not None
    assert result.primitive == CirclePrimitive((0.0, 0.0), 5.0)
    assert list(result.offsets) == centers
    assert len(result) == 4


def test_radius_mismatch_returns_no_match():
    circles = [CirclePrimitive((0, 0), 5), CirclePrimitive((1, 0), 5), CirclePrimitive((2, 0), 7)]

    assert try_batch(circles) is None


def test_accepts_form_container():
    form = circle([1, 2, 3], 0, 2)

    result = try_batch(form)

    assert result == FormBatch(CirclePrimitive((0, 0), 2), ((1.0, 0.0), (2.0, 0.0), (3.0, 0.0)))


def test_singleton_batches_trivially():
    rect = RectanglePrimitive((1, 1), 2, 3)

    result = try_batch([rect])

    assert result == FormBatch(rect, ((0.0, 0.0),))


def test_empty_input_has_no_batch():
    assert try_batch([]) is None


@pytest.mark.parametrize(
    'prims',
    [
        [RectanglePrimitive((0, 0), 1, 1), RectanglePrimitive((2, 0), 1, 1)],
        [PolygonPrimitive(((0, 0), (1, 0), (0, 1))), PolygonPrimitive(((5, 5), (6, 5), (5, 6)))],
        [CirclePrimitive((0, 0), 1), RectanglePrimitive((0, 0), 1, 1)],
    ],
)
def test_other_kinds_and_mixed_arrays_never_batch(prims):
    assert try_batch(prims) is None


def test_try_batch_does_not_modify_input():
    circles = [CirclePrimitive((3, 3), 1), CirclePrimitive((1, 1), 1)]
    before = list(circles)

    try_batch(circles)

    assert circles == before


def test_filter_redundant_offsets_drops_close_points():
    assert filter_redundant_offsets([(0, 0), (0.01, 0), (1, 1)]) == [(0.0, 0.0), (1.0, 1.0)]


def test_filter_redundant_offsets_sorts_lexicographically():
    result = filter_redundant_offsets([(2, 0), (1, 5), (1, 2), (0, 9)])

    assert result == [(0.0, 9.0), (1.0, 2.0), (1.0, 5.0), (2.0, 0.0)]


def test_filter_redundant_offsets_empty():
    assert filter_redundant_offsets([]) == []


def test_filter_redundant_offsets_compares_against_last_retained_point():
    # each neighbour is within tolerance, but the chain drifts past it
    chain = [(0.0, 0.0), (0.03, 0.0), (0.06, 0.0), (0.09, 0.0), (0.12, 0.0)]

    result = filter_redundant_offsets(chain)

    assert result == [(0.0, 0.0), (0.06, 0.0), (0.12, 0.0)]


def test_filter_redundant_offsets_boundary_is_inclusive():
    assert filter_redundant_offsets([(0, 0), (0.05, 0)], threshold=0.05) == [(0.0, 0.0)]


def test_filter_redundant_offsets_uses_config_threshold():
    config = BatchingConfig(offset_redundancy_threshold=2.0)

    assert filter_redundant_offsets([(0, 0), (1, 0.5), (3, 0)], config=config) == [(0.0, 0.0), (3.0, 0.0)]
