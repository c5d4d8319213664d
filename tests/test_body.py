import copy

import numpy as np
import pytest
from rigidbody.dynamics.attitude import make_attitude
from rigidbody.dynamics.body import RigidBody


@pytest.fixture
def body_default():
    """Fixture for a default body at rest."""
    return RigidBody("test_body")

def test_initialization(body_default):
    b = body_default
    assert b.name == "test_body"
    assert b.dtype == np.float64
    for v in (b.pos, b.vel, b.acc):
        assert np.allclose(v, np.zeros(3))
    for att in (b.ori, b.tor, b.wre):
        assert att.magnitude == 0.0
        assert np.allclose(att.axis, np.zeros(3))

def test_initialization_with_state():
    b = RigidBody(
        "moving",
        pos=[1.0, 2.0, 3.0],
        vel=[0.1, 0.2, 0.3],
        ori=(0.5, [0.0, 1.0, 0.0]),
        tor=(2.0, np.array([1.0, 0.0, 0.0])),
    )
    assert np.allclose(b.pos, [1.0, 2.0, 3.0])
    assert np.allclose(b.vel, [0.1, 0.2, 0.3])
    assert b.ori.magnitude == 0.5
    assert np.allclose(b.tor.axis, [1.0, 0.0, 0.0])

def test_initialization_copies_inputs():
    pos = np.array([1.0, 0.0, 0.0])
    axis = np.array([0.0, 0.0, 1.0])
    b = RigidBody(pos=pos, ori=(0.0, axis))
    pos[0] = 99.0
    axis[2] = 99.0
    assert b.pos[0] == 1.0
    assert b.ori.axis[2] == 1.0

@pytest.mark.parametrize("kwargs", [
    {"pos": [1.0, 2.0]},
    {"vel": np.zeros((3, 1))},
    {"ori": (1.0, [0.0, 1.0])},
    {"tor": 1.0},
    {"wre": ([1.0], [0.0, 0.0, 1.0])},
])
def test_initialization_rejects_bad_shapes(kwargs):
    with pytest.raises(ValueError):
        RigidBody(**kwargs)

def test_float32_dtype():
    b = RigidBody(vel=[1, 0, 0], acc=[0, -1, 0], tor=(1.0, [0, 0, 1]), dtype=np.float32)
    b.update(0.1)
    assert b.pos.dtype == np.float32
    assert b.vel.dtype == np.float32
    assert b.ori.axis.dtype == np.float32
    assert np.allclose(b.vel, [1.0, -0.1, 0.0], atol=1e-6)

def test_update_linear_constant_acceleration():
    b = RigidBody(pos=[1.0, 2.0, 3.0], vel=[0.5, -1.0, 2.0], acc=[3.0, 0.0, -2.0])
    dt = 0.37
    b.update_linear(dt)
    assert np.allclose(b.vel, [0.5 + 3.0 * dt, -1.0, 2.0 - 2.0 * dt])
    assert np.allclose(b.pos, [
        1.0 + 0.5 * dt + 0.5 * 3.0 * dt**2,
        2.0 - 1.0 * dt,
        3.0 + 2.0 * dt - 0.5 * 2.0 * dt**2,
    ])

def test_update_linear_leaves_acceleration(body_default):
    body_default.acc[:] = [1.0, 2.0, 3.0]
    body_default.update_linear(0.5)
    assert np.allclose(body_default.acc, [1.0, 2.0, 3.0])

def test_update_linear_does_not_touch_angular(spinner):
    before = spinner.copy()
    spinner.update_linear(0.2)
    assert spinner.ori.magnitude == before.ori.magnitude
    assert np.array_equal(spinner.ori.axis, before.ori.axis)
    assert np.array_equal(spinner.tor.axis, before.tor.axis)

def test_update_linear_zero_dt(projectile):
    projectile.update_linear(0.0)
    assert np.allclose(projectile.pos, [0, 0, 0])
    assert np.allclose(projectile.vel, [1, 0, 0])

def test_update_linear_reverses(projectile):
    projectile.update_linear(0.3)
    projectile.update_linear(-0.3)
    assert np.allclose(projectile.pos, [0, 0, 0], atol=1e-14)
    assert np.allclose(projectile.vel, [1, 0, 0], atol=1e-14)

def test_update_angular_spins_axis(spinner):
    # ori axis x, tor 2 rad/s about z, no wrench -> axis turns by 2*dt
    dt = np.pi / 4
    spinner.update_angular(dt)
    assert np.allclose(spinner.ori.axis, [0.0, 1.0, 0.0], atol=1e-12)
    assert np.isclose(spinner.ori.magnitude, 0.0)
    assert spinner.tor.magnitude == 2.0
    assert np.allclose(spinner.tor.axis, [0.0, 0.0, 1.0])

def test_update_angular_parallel_accumulates():
    # Everything about z: ori angle grows like s + v t + a t²/2
    b = RigidBody(
        ori=(0.1, [0, 0, 1]),
        tor=(0.5, [0, 0, 1]),
        wre=(2.0, [0, 0, 1]),
    )
    dt = 0.2
    b.update_angular(dt)
    assert np.isclose(b.tor.magnitude, 0.5 + 2.0 * dt)
    assert np.isclose(b.ori.magnitude, 0.1 + 0.5 * dt + 0.5 * 2.0 * dt**2)
    assert np.allclose(b.ori.axis, [0, 0, 1])

def test_update_angular_leaves_wrench():
    b = RigidBody(tor=(1.0, [1, 0, 0]), wre=(0.5, [0, 1, 0]))
    b.update_angular(0.4)
    assert b.wre.magnitude == 0.5
    assert np.allclose(b.wre.axis, [0, 1, 0])

def test_update_matches_separate_calls(spinner):
    spinner.acc[:] = [0.0, 0.0, -1.0]
    spinner.wre = make_attitude(0.3, [0, 1, 0])
    other = spinner.copy()

    spinner.update(0.1)
    other.update_linear(0.1)
    other.update_angular(0.1)

    assert np.array_equal(spinner.pos, other.pos)
    assert np.array_equal(spinner.vel, other.vel)
    assert spinner.ori.magnitude == other.ori.magnitude
    assert np.array_equal(spinner.ori.axis, other.ori.axis)
    assert np.array_equal(spinner.tor.axis, other.tor.axis)

def test_update_end_to_end(projectile):
    projectile.update(0.1)
    assert np.allclose(projectile.vel, [1.0, -0.98, 0.0])
    assert np.allclose(projectile.pos, [0.1, -0.049, 0.0])
    assert projectile.ori.magnitude == 0.0
    assert np.allclose(projectile.ori.axis, [0.0, 0.0, 1.0])
    assert projectile.tor.magnitude == 0.0
    assert np.allclose(projectile.tor.axis, np.zeros(3))

def test_copy_is_independent(projectile):
    clone = projectile.copy()
    clone.update(0.5)
    clone.acc[0] = 7.0
    assert np.allclose(projectile.pos, [0, 0, 0])
    assert projectile.acc[0] == 0.0
    assert clone.name == projectile.name

def test_copy_module_support(projectile):
    for clone in (copy.copy(projectile), copy.deepcopy(projectile)):
        assert clone is not projectile
        assert clone.pos is not projectile.pos
        assert np.array_equal(clone.vel, projectile.vel)

def test_as_dict(projectile):
    d = projectile.as_dict()
    assert d["vel_x"] == 1.0
    assert d["acc_y"] == -9.8
    assert d["ori_mag"] == 0.0
    assert d["ori_z"] == 1.0
    assert len(d) == 3 * 3 + 3 * 4

def test_repr(projectile):
    assert "projectile" in repr(projectile)

@pytest.mark.parametrize("dt", [np.float64(0.1), np.linspace(0.0, 0.2, 3)[1], 0.1])
def test_float32_dtype_with_numpy_step(dt):
    b = RigidBody(
        vel=[1, 0, 0],
        acc=[0, -1, 0],
        ori=(0.0, [1, 0, 0]),
        tor=(1.0, [0, 0, 1]),
        wre=(0.5, [0, 1, 0]),
        dtype=np.float32,
    )
    b.update(dt)
    for field in ("pos", "vel", "acc"):
        assert getattr(b, field).dtype == np.float32
    for field in ("ori", "tor", "wre"):
        magnitude, axis = getattr(b, field)
        assert np.asarray(magnitude).dtype == np.float32
        assert axis.dtype == np.float32

def test_reassigned_plain_values_keep_dtype():
    b = RigidBody(dtype=np.float32)
    b.acc = [0.0, -9.8, 0.0]
    b.wre = (2.0, [0.0, 0.0, 1.0])
    b.tor = (0.5, np.array([0.0, 0.0, 1.0]))
    b.update(np.float64(0.1))
    assert b.vel.dtype == np.float32
    assert np.allclose(b.vel, [0.0, -0.98, 0.0], atol=1e-6)
    assert np.asarray(b.tor.magnitude).dtype == np.float32
    assert np.isclose(b.tor.magnitude, 0.5 + 2.0 * 0.1, atol=1e-6)

def test_update_accepts_replaced_acceleration_list(projectile):
    projectile.acc = [0.0, -9.8, 0.0]
    projectile.update(0.1)
    assert np.allclose(projectile.vel, [1.0, -0.98, 0.0])
    assert np.allclose(projectile.pos, [0.1, -0.049, 0.0])
    # Caller's list is read, not modified
    assert projectile.acc == [0.0, -9.8, 0.0]
