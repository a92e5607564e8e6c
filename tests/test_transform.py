import pytest

from enginecore.matrix import Matrix
from enginecore.quat import Quat
from enginecore.transform import Transform
from enginecore.vector import Vector


def assert_vector_close(a, b, tol=1e-9):
    assert a.x == pytest.approx(b.x, abs=tol)
    assert a.y == pytest.approx(b.y, abs=tol)
    assert a.z == pytest.approx(b.z, abs=tol)


def assert_quat_close(a, b, tol=1e-9):
    for x, y in zip(a, b):
        assert x == pytest.approx(y, abs=tol)


def test_default_matrix_is_identity():
    assert Transform().matrix() == Matrix.identity()


def test_defaults():
    t = Transform()
    assert t.position == Vector(0.0, 0.0, 0.0)
    assert t.scale == Vector(1.0, 1.0, 1.0)
    assert list(t.rotation) == [0.0, 0.0, 0.0, 1.0]


def test_default_axes():
    t = Transform()
    assert t.forward() == Vector(1.0, 0.0, 0.0)
    assert t.right() == Vector(0.0, 1.0, 0.0)
    assert t.up() == Vector(0.0, 0.0, 1.0)


def test_translate_and_add_scale():
    t = Transform()
    t.translate(Vector(1.0, 2.0, 3.0))
    t.translate(Vector(1.0, 2.0, 3.0))
    assert_vector_close(t.position, Vector(1.0, 2.0, 3.0) * 2.0)
    t.add_scale(Vector(1.0, 2.0, 3.0))
    assert_vector_close(t.scale, Vector(1.0, 1.0, 1.0) + Vector(1.0, 2.0, 3.0))


def test_set_rotation_accepts_euler_and_quat():
    euler = Vector(10.0, 20.0, 30.0)
    t = Transform()
    t.set_rotation(euler)
    assert_quat_close(t.rotation, Quat.from_euler(euler))
    q = Quat(0.0, 0.0, 0.0, 1.0)
    t.set_rotation(q)
    assert t.rotation is q


def test_matrix_translation_and_scale():
    t = Transform(Vector(4.0, 5.0, 6.0), Quat.from_euler(Vector(0.0, 0.0, 45.0)), Vector(2.0, 3.0, 4.0))
    m = t.matrix()
    assert_vector_close(m.translation(), Vector(4.0, 5.0, 6.0))
    assert_vector_close(m.scale(), Vector(2.0, 3.0, 4.0))


def test_forward_matches_rotated_x_axis():
    t = Transform()
    t.rotate_yaw(37.0)
    t.rotate_pitch(-12.0)
    assert_vector_close(t.forward(), t.rotation.rotate_vector(Vector(1.0, 0.0, 0.0)))
    assert_vector_close(t.up(), t.rotation.rotate_vector(Vector(0.0, 0.0, 1.0)))


def test_axes_stay_orthonormal():
    t = Transform(rotation=Quat.from_euler(Vector(30.0, -20.0, 75.0)))
    f, r, u = t.forward(), t.right(), t.up()
    assert f.dot(r) == pytest.approx(0.0, abs=1e-9)
    assert f.dot(u) == pytest.approx(0.0, abs=1e-9)
    assert f.length() == pytest.approx(1.0)


def test_roll_keeps_forward():
    t = Transform()
    t.rotate_roll(60.0)
    assert_vector_close(t.forward(), Vector(1.0, 0.0, 0.0))


def test_rotate_yaw_equals_axis_rotation():
    a = Transform()
    a.rotate_yaw(90.0)
    b = Transform()
    b.rotate_about_axis(Vector(0.0, 0.0, 1.0), 90.0)
    assert_quat_close(a.rotation, b.rotation)


def test_rotate_with_only_yaw_matches_rotate_yaw():
    a = Transform()
    a.rotate(Vector(0.0, 0.0, 90.0))
    b = Transform()
    b.rotate_yaw(90.0)
    assert_quat_close(a.rotation, b.rotation)


def test_view_matrix_maps_position_to_origin():
    t = Transform(Vector(3.0, -1.0, 2.0), Quat.from_euler(Vector(0.0, 15.0, 40.0)))
    view = t.view_matrix()
    assert_vector_close(view.transform_position(t.position), Vector(0.0, 0.0, 0.0))
    ahead = view.transform_position(t.position + t.forward())
    assert ahead.z == pytest.approx(1.0)


def test_look_at_points_forward_to_target():
    t = Transform(position=Vector(1.0, 1.0, 1.0))
    target = Vector(2.0, 3.0, 4.0)
    t.look_at(target)
    assert_vector_close(t.forward(), (target - t.position).get_safe_normal())


def test_identity_composition():
    t = Transform(Vector(1.0, 2.0, 3.0), Quat.from_euler(Vector(5.0, 6.0, 7.0)), Vector(2.0, 2.0, 2.0))
    composed = Transform() * t
    assert_vector_close(composed.position, t.position)
    assert_quat_close(composed.rotation, t.rotation)
    assert_vector_close(composed.scale, t.scale)


def test_composition_applies_right_operand_first():
    a = Transform(Vector(1.0, -2.0, 0.5), Quat.from_euler(Vector(10.0, 20.0, 30.0)), Vector(2.0, 2.0, 2.0))
    b = Transform(Vector(-3.0, 4.0, 1.0), Quat.from_euler(Vector(-5.0, 15.0, 60.0)), Vector(3.0, 3.0, 3.0))
    point = Vector(0.25, -1.5, 2.0)
    direct = (a * b).matrix().transform_position(point)
    chained = a.matrix().transform_position(b.matrix().transform_position(point))
    assert_vector_close(direct, chained)


def test_matrix_round_trips_through_to_transform_position_and_scale():
    t = Transform(Vector(7.0, 8.0, 9.0), Quat.from_euler(Vector(0.0, 0.0, 30.0)), Vector(2.0, 3.0, 4.0))
    back = t.matrix().to_transform()
    assert_vector_close(back.position, t.position)
    assert_vector_close(back.scale, t.scale)