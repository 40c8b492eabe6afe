"""Tests for constant-gravity zero-effort predictions."""
from __future__ import annotations

import numpy as np
import pytest

from ogl_guidance.control.optimal_guidance_law import (
    GuidanceLawEvaluator,
    gravity_compensated_command,
)
from ogl_guidance.core.constants import G0
from ogl_guidance.guidance.zero_effort import (
    zero_effort_errors,
    zero_effort_miss,
    zero_effort_velocity,
)

GRAVITY = np.array([0.0, 0.0, -G0])


def test_field_free_miss_is_straight_line_error():
    zem = zero_effort_miss(
        position=[0.0, 0.0, 0.0],
        velocity=[1.0, 2.0, -1.0],
        target_position=[10.0, 10.0, 10.0],
        time_to_go=4.0,
    )
    np.testing.assert_allclose(zem, [6.0, 2.0, 14.0])


def test_gravity_adds_free_fall_drop():
    zem = zero_effort_miss(
        position=[0.0, 0.0, 100.0],
        velocity=[0.0, 0.0, 0.0],
        target_position=[0.0, 0.0, 0.0],
        time_to_go=2.0,
        gravity=GRAVITY,
    )
    # Free fall covers ½ g t² = 2 g, leaving 100 - 2 g still to drop.
    np.testing.assert_allclose(zem, [0.0, 0.0, -100.0 + 2.0 * G0])


def test_velocity_miss_includes_gravity_gain():
    zev = zero_effort_velocity(
        velocity=[3.0, 0.0, -5.0],
        target_velocity=[0.0, 0.0, 0.0],
        time_to_go=1.5,
        gravity=GRAVITY,
    )
    np.testing.assert_allclose(zev, [-3.0, 0.0, 5.0 + 1.5 * G0])


def test_bundle_matches_individual_predictions():
    r = np.array([120.0, -40.0, 900.0])
    v = np.array([-3.0, 1.0, -45.0])
    r_f = np.zeros(3)
    v_f = np.array([0.0, 0.0, -1.0])

    errors = zero_effort_errors(r, v, r_f, v_f, 18.0, gravity=GRAVITY)

    assert np.array_equal(errors.zem, zero_effort_miss(r, v, r_f, 18.0, GRAVITY))
    assert np.array_equal(errors.zev, zero_effort_velocity(v, v_f, 18.0, GRAVITY))
    assert errors.time_to_go == 18.0
    assert errors.miss_distance == pytest.approx(np.linalg.norm(errors.zem))
    assert errors.velocity_miss == pytest.approx(np.linalg.norm(errors.zev))


def test_already_on_target_needs_no_control():
    # Coasting exactly onto the target: only gravity is left to cancel.
    r = np.array([0.0, 0.0, 50.0])
    v_f = np.array([0.0, 0.0, -10.0])
    t_go = 5.0
    v = v_f - GRAVITY * t_go
    r_f = r + v * t_go + 0.5 * GRAVITY * t_go * t_go

    errors = zero_effort_errors(r, v, r_f, v_f, t_go, gravity=GRAVITY)
    control = GuidanceLawEvaluator().evaluate(errors)

    np.testing.assert_allclose(control, np.zeros(3), atol=1e-12)
    np.testing.assert_allclose(gravity_compensated_command(control, GRAVITY),
                               -GRAVITY, atol=1e-12)


@pytest.mark.parametrize("bad", [[1.0, 2.0], [[1.0, 2.0, 3.0]], 4.0])
def test_rejects_non_vector3_input(bad):
    with pytest.raises(ValueError):
        zero_effort_miss(bad, [0.0, 0.0, 0.0], [0.0, 0.0, 0.0], 1.0)


def test_rejects_bad_gravity_shape():
    with pytest.raises(ValueError):
        zero_effort_velocity([0.0, 0.0, 0.0], [0.0, 0.0, 0.0], 1.0, gravity=[0.0, -G0])
