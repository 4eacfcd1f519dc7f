import numpy as np
import pytest

from emberfield.camera import (
    PITCH_LIMIT,
    SENSITIVITY,
    SPEED,
    ZOOM,
    ZOOM_MAX,
    ZOOM_MIN,
    CameraMovement,
    FreeCamera,
)


def test_defaults():
    cam = FreeCamera()
    assert cam.yaw == -90.0
    assert cam.pitch == 0.0
    assert cam.movement_speed == SPEED
    assert cam.mouse_sensitivity == SENSITIVITY
    assert cam.zoom == ZOOM


def test_default_front_looks_down_negative_z():
    cam = FreeCamera()
    np.testing.assert_allclose(cam.front, [0.0, 0.0, -1.0], atol=1e-12)


@pytest.mark.parametrize("yaw,pitch", [(-90.0, 0.0), (30.0, 20.0), (200.0, -45.0)])
def test_basis_is_orthonormal(yaw, pitch):
    cam = FreeCamera(yaw=yaw, pitch=pitch)
    for v in (cam.front, cam.right, cam.up):
        assert np.linalg.norm(v) == pytest.approx(1.0)
    assert np.dot(cam.front, cam.right) == pytest.approx(0.0, abs=1e-12)
    assert np.dot(cam.front, cam.up) == pytest.approx(0.0, abs=1e-12)
    assert np.dot(cam.right, cam.up) == pytest.approx(0.0, abs=1e-12)


def test_pitch_is_clamped():
    cam = FreeCamera()
    cam.process_mouse_movement(0.0, 10000.0)
    assert cam.pitch == PITCH_LIMIT
    cam.process_mouse_movement(0.0, -100000.0)
    assert cam.pitch == -PITCH_LIMIT


def test_pitch_unconstrained():
    cam = FreeCamera()
    cam.process_mouse_movement(0.0, 10000.0, constrain_pitch=False)
    assert cam.pitch > PITCH_LIMIT


def test_mouse_movement_scales_by_sensitivity():
    cam = FreeCamera(yaw=0.0, pitch=0.0)
    cam.process_mouse_movement(50.0, 20.0)
    assert cam.yaw == pytest.approx(50.0 * SENSITIVITY)
    assert cam.pitch == pytest.approx(20.0 * SENSITIVITY)


def test_scroll_clamps_zoom():
    cam = FreeCamera()
    cam.process_mouse_scroll(1000.0)
    assert cam.zoom == ZOOM_MIN
    cam.process_mouse_scroll(-1000.0)
    assert cam.zoom == ZOOM_MAX


def test_scroll_inside_range():
    cam = FreeCamera()
    cam.process_mouse_scroll(5.0)
    assert cam.zoom == pytest.approx(ZOOM - 5.0)


@pytest.mark.parametrize(
    "forward,backward",
    [
        (CameraMovement.FORWARD, CameraMovement.BACKWARD),
        (CameraMovement.LEFT, CameraMovement.RIGHT),
        (CameraMovement.UP, CameraMovement.DOWN),
    ],
)
def test_opposite_moves_cancel(forward, backward):
    cam = FreeCamera(position=(1.0, 2.0, 3.0), yaw=15.0, pitch=10.0)
    start = cam.position.copy()
    cam.process_keyboard(forward, 0.5)
    assert not np.allclose(cam.position, start)
    cam.process_keyboard(backward, 0.5)
    np.testing.assert_allclose(cam.position, start, atol=1e-12)


def test_forward_moves_along_front():
    cam = FreeCamera(yaw=40.0, pitch=5.0)
    cam.process_keyboard(CameraMovement.FORWARD, 2.0)
    assert np.linalg.norm(cam.position) == pytest.approx(SPEED * 2.0)
    np.testing.assert_allclose(cam.position / np.linalg.norm(cam.position), cam.front)


def test_view_matrix_maps_eye_to_origin():
    cam = FreeCamera(position=(15.0, 3.0, 45.0), yaw=10.0, pitch=-20.0)
    view = cam.view_matrix()
    eye = view @ np.append(cam.position, 1.0)
    np.testing.assert_allclose(eye, [0.0, 0.0, 0.0, 1.0], atol=1e-9)


def test_view_matrix_points_front_down_negative_z():
    cam = FreeCamera(position=(4.0, -2.0, 7.0), yaw=75.0, pitch=30.0)
    view = cam.view_matrix()
    ahead = view @ np.append(cam.position + cam.front, 1.0)
    np.testing.assert_allclose(ahead[:3], -np.array([0.0, 0.0, 1.0]), atol=1e-9)