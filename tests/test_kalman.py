import numpy as np
import pytest

from motrack.kalman import KalmanFilter


def test_create():
    kf = KalmanFilter(4, 2)
    assert kf.dim_x == 4
    assert kf.dim_z == 2
    assert kf.x.shape == (4,)
    assert kf.p.shape == (4, 4)
    np.testing.assert_allclose(kf.f, np.eye(4), atol=1e-10)
    expected_h = np.array([[1.0, 0.0, 0.0, 0.0], [0.0, 1.0, 0.0, 0.0]])
    np.testing.assert_allclose(kf.h, expected_h, atol=1e-10)
    np.testing.assert_allclose(kf.x, np.zeros(4), atol=1e-10)


def test_matrix_dimensions():
    kf = KalmanFilter(4, 2)
    assert kf.f.shape == (4, 4)
    assert kf.h.shape == (2, 4)
    assert kf.r.shape == (2, 2)
    assert kf.q.shape == (4, 4)


def test_predict():
    kf = KalmanFilter(2, 1)
    kf.x = np.array([1.0, 2.0])
    kf.f = np.array([[1.0, 1.0], [0.0, 1.0]])
    kf.q = np.array([[0.1, 0.0], [0.0, 0.1]])
    kf.p = np.eye(2)

    kf.predict()

    assert kf.x[0] == pytest.approx(3.0, abs=1e-10)
    assert kf.x[1] == pytest.approx(2.0, abs=1e-10)
    np.testing.assert_allclose(kf.p, [[2.1, 1.0], [1.0, 1.1]], atol=1e-10)


def test_predict_with_control_input():
    kf = KalmanFilter(2, 1)
    kf.x = np.array([1.0, 0.0])
    kf.b = np.array([[1.0], [0.0]])
    kf.predict(np.array([2.0]))
    np.testing.assert_allclose(kf.x, [3.0, 0.0], atol=1e-10)


def test_update():
    kf = KalmanFilter(2, 1)
    kf.x = np.array([0.0, 0.0])
    kf.h = np.array([[1.0, 0.0]])
    kf.r = np.array([[1.0]])
    kf.p = np.array([[10.0, 0.0], [0.0, 10.0]])

    kf.update(np.array([5.0]))

    assert kf.x[0] == pytest.approx(4.545454545, abs=1e-6)
    assert kf.x[1] == pytest.approx(0.0, abs=1e-10)


def test_predict_update_cycle():
    kf = KalmanFilter(2, 1)
    kf.x = np.array([0.0, 1.0])
    kf.f = np.array([[1.0, 1.0], [0.0, 1.0]])
    kf.h = np.array([[1.0, 0.0]])
    kf.q = np.array([[0.01, 0.0], [0.0, 0.01]])
    kf.r = np.array([[0.1]])
    kf.p = np.eye(2)

    for step, z_val in enumerate([1.0, 2.0, 3.0, 4.0, 5.0]):
        kf.predict()
        kf.update([z_val])
        if step >= 2:
            assert abs(kf.x[0] - z_val) < 0.5
            assert abs(kf.x[1] - 1.0) < 0.5


def test_multi_dimensional_predict():
    kf = KalmanFilter(6, 3)
    kf.x = np.array([1.0, 2.0, 3.0, 0.5, 0.5, 0.5])
    f = np.eye(6)
    f[0, 3] = f[1, 4] = f[2, 5] = 1.0
    kf.f = f

    kf.predict()

    np.testing.assert_allclose(kf.x, [1.5, 2.5, 3.5, 0.5, 0.5, 0.5], atol=1e-10)


def test_partial_measurement():
    kf = KalmanFilter(4, 2)
    kf.x = np.array([1.0, 2.0, 0.0, 0.0])
    h = np.array([[1.0, 0.0, 0.0, 0.0], [0.0, 0.0, 0.0, 0.0]])
    r = np.eye(2)
    kf.p = np.eye(4) * 10.0

    kf.update(np.array([3.0, 999.0]), r, h)

    assert 1.5 < kf.x[0] < 2.9
    assert kf.x[1] == pytest.approx(2.0, abs=0.1)


def test_update_overrides_do_not_replace_filter_matrices():
    kf = KalmanFilter(2, 1)
    original_h = kf.h.copy()
    original_r = kf.r.copy()
    kf.update([1.0], np.array([[5.0]]), np.array([[0.0, 1.0]]))
    np.testing.assert_array_equal(kf.h, original_h)
    np.testing.assert_array_equal(kf.r, original_r)


def test_singular_innovation_covariance():
    kf = KalmanFilter(2, 1)
    kf.x = np.array([1.0, 0.0])
    kf.p = np.zeros((2, 2))
    kf.r = np.zeros((1, 1))

    kf.update(np.array([5.0]))

    np.testing.assert_allclose(kf.si, np.eye(1))
    np.testing.assert_allclose(kf.x, [1.0, 0.0], atol=1e-10)
    assert np.all(np.isfinite(kf.p))


def test_covariance_stays_symmetric_over_cycles():
    kf = KalmanFilter(4, 2)
    f = np.eye(4)
    f[0, 2] = f[1, 3] = 1.0
    kf.f = f
    for z in ([1.0, 1.0], [2.0, 2.5], [3.0, 3.9]):
        kf.predict()
        kf.update(z)
    np.testing.assert_allclose(kf.p, kf.p.T, atol=1e-9)


def test_negative_dimension_rejected():
    with pytest.raises(ValueError):
        KalmanFilter(-1, 1)