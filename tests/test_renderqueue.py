from types import SimpleNamespace

from solong.mlx42.renderqueue import DrawCall, sort_render_queue


def _image(*depths):
    return SimpleNamespace(instances=[SimpleNamespace(z=z) for z in depths])


def test_z_reads_instance_depth():
    img = _image(3, 7)
    call = DrawCall(img, 1)
    assert call.z == 7
    img.instances[1].z = 2
    assert call.z == 2


def test_sorted_by_depth():
    img = _image(5, 1, 3, 0)
    calls = [DrawCall(img, i) for i in range(4)]
    result = sort_render_queue(calls)
    assert [c.z for c in result] == [0, 1, 3, 5]
    assert result[0] is calls[3]
    assert result[-1] is calls[0]


def test_empty_queue():
    assert sort_render_queue([]) == []


def test_input_not_mutated():
    img = _image(2, 1)
    calls = [DrawCall(img, 0), DrawCall(img, 1)]
    snapshot = list(calls)
    sort_render_queue(calls)
    assert calls == snapshot


def test_equal_depths_reverse_queued_order():
    img = _image(4, 4, 4)
    a, b, c = (DrawCall(img, i) for i in range(3))
    result = sort_render_queue([a, b, c])
    assert result[0] is c and result[1] is b and result[2] is a


def test_result_is_permutation():
    first, second = _image(9, 2), _image(2, 6, 1)
    calls = [DrawCall(first, 0), DrawCall(second, 0), DrawCall(first, 1),
             DrawCall(second, 2), DrawCall(second, 1)]
    result = sort_render_queue(calls)
    assert len(result) == len(calls)
    assert all(any(r is c for r in result) for c in calls)
    depths = [c.z for c in result]
    assert depths == sorted(depths)


def test_accepts_generator():
    img = _image(3, 2, 1)
    result = sort_render_queue(DrawCall(img, i) for i in range(3))
    assert [c.instance_id for c in result] == [2, 1, 0]