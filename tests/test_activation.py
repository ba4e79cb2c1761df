import numpy as np
import pytest

from bpnet.activation import (ACTIVATIONS, Identity, LeakyReLU, ReLU, Sigmoid, Tanh,
                              get_activation)


def numeric_derivative(fn, x, h=1e-6):
    return (fn(x + h) - fn(x - h)) / (2 * h)


@pytest.mark.parametrize('fn', [Sigmoid(), Tanh(), LeakyReLU(0.1)])
def test_derivative_matches_finite_difference(fn):
    # stay away from the kink of the leaky ReLU at 0
    x = np.array([-2.0, -0.5, 0.3, 1.7])
    np.testing.assert_allclose(fn.derivative()(x), numeric_derivative(fn, x), rtol=1e-5)


def test_scalar_and_array_agree():
    fn = Sigmoid()
    assert fn.invoke(0.0) == pytest.approx(0.5)
    np.testing.assert_allclose(fn(np.array([0.0, 0.0])), [0.5, 0.5])


def test_identity():
    x = np.array([1.5, -3.0])
    assert Identity()(x) is x
    np.testing.assert_array_equal(Identity().derivative()(x), [1.0, 1.0])


def test_relu():
    x = np.array([-1.0, 0.0, 2.0])
    np.testing.assert_array_equal(ReLU()(x), [0.0, 0.0, 2.0])
    np.testing.assert_array_equal(ReLU().derivative()(x), [0.0, 0.0, 1.0])


def test_get_activation():
    for name, cls in ACTIVATIONS.items():
        assert isinstance(get_activation(name), cls)
    assert isinstance(get_activation('TANH'), Tanh)
    with pytest.raises(ValueError, match='Unknown activation'):
        get_activation('softmax')
