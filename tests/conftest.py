import matplotlib
import numpy as np
import pytest

matplotlib.use('Agg')

from bpnet import Identity, Network, Tanh  # noqa: E402


@pytest.fixture
def identity_net():
    net = Network(2, 2, [2, 2], Identity())
    net.set_weights([np.eye(2), np.eye(2)])
    return net


@pytest.fixture
def tanh_net():
    return Network(3, 3, [4, 5, 3], Tanh(), rng=np.random.default_rng(0))
