import numpy as np


class ActivationFunction:
    def invoke(self, x):
        raise NotImplementedError

    def derivative(self):
        raise NotImplementedError

    def __call__(self, x):
        return self.invoke(x)

    def __repr__(self):
        return f"{type(self).__name__}()"


class Constant(ActivationFunction):
    def __init__(self, value):
        self.value = value

    def invoke(self, x):
        # Keep the input's shape so it can be applied to a whole layer at once
        return np.full_like(x, self.value, dtype=np.result_type(x, float))

    def derivative(self):
        return Constant(0.0)

    def __repr__(self):
        return f"Constant({self.value})"


class Identity(ActivationFunction):
    """Pass-through used for the output layer of every network."""

    def invoke(self, x):
        return x

    def derivative(self):
        return Constant(1.0)


# Activation functions
class Sigmoid(ActivationFunction):
    def invoke(self, x):
        return 1 / (1 + np.exp(-x))

    def derivative(self):
        return SigmoidDerivative()


class SigmoidDerivative(ActivationFunction):
    def invoke(self, x):
        s = 1 / (1 + np.exp(-x))
        return s * (1 - s)


class Tanh(ActivationFunction):
    def invoke(self, x):
        return np.tanh(x)

    def derivative(self):
        return TanhDerivative()


class TanhDerivative(ActivationFunction):
    def invoke(self, x):
        return 1 - np.tanh(x) ** 2


class ReLU(ActivationFunction):
    def invoke(self, x):
        return np.maximum(0, x)

    def derivative(self):
        return LeakyReLUDerivative(0.0)


class LeakyReLU(ActivationFunction):
    def __init__(self, negative_slope=0.01):
        self.negative_slope = negative_slope

    def invoke(self, x):
        return np.where(x > 0, x, self.negative_slope * x)

    def derivative(self):
        return LeakyReLUDerivative(self.negative_slope)

    def __repr__(self):
        return f"LeakyReLU({self.negative_slope})"


class LeakyReLUDerivative(ActivationFunction):
    def __init__(self, negative_slope):
        self.negative_slope = negative_slope

    def invoke(self, x):
        return np.where(x > 0, 1.0, self.negative_slope)


ACTIVATIONS = {
    'identity': Identity,
    'sigmoid': Sigmoid,
    'tanh': Tanh,
    'relu': ReLU,
    'leaky_relu': LeakyReLU,
}


def get_activation(name):
    """Build an activation function by name, e.g. ``get_activation('tanh')``."""
    try:
        return ACTIVATIONS[name.lower()]()
    except KeyError:
        raise ValueError(f"Unknown activation '{name}', choose from {sorted(ACTIVATIONS)}") from None
