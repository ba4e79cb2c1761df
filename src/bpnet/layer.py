import numpy as np

from .errors import ShapeMismatch


class Layer:
    """Dense layer without bias: ``outputs = activation(weight @ inputs)``.

    The weight matrix has shape ``(output_width, input_width)``, so
    ``weight[j][i]`` connects input node ``i`` to output node ``j``.
    The pre-activation values of the most recent call to
    :meth:`compute_outputs` are kept and can be read back with
    :meth:`get_activations`.
    """

    def __init__(self, input_width, output_width, activation, dtype=np.float64, rng=None):
        self.input_width = input_width
        self.output_width = output_width
        self.activation = activation
        self.dtype = np.dtype(dtype)

        rng = np.random.default_rng() if rng is None else rng
        # Scaled so the pre-activations start out with roughly unit variance
        self.weight = (rng.standard_normal((output_width, input_width)) / np.sqrt(input_width)).astype(self.dtype)
        self._pre_activations = np.zeros(output_width, dtype=self.dtype)

    @property
    def shape(self):
        return (self.output_width, self.input_width)

    def compute_outputs(self, inputs):
        x = np.asarray(inputs, dtype=self.dtype)
        if x.shape != (self.input_width,):
            raise ShapeMismatch('layer input', (self.input_width,), x.shape)
        self._pre_activations = self.weight @ x
        # np.array copies, so an identity activation never aliases the cached values
        return np.array(self.activation(self._pre_activations), dtype=self.dtype)

    def get_activations(self):
        return self._pre_activations.copy()

    def set_weights(self, weights):
        try:
            weights = np.asarray(weights, dtype=self.dtype)
        except ValueError:
            # ragged rows
            raise ShapeMismatch('layer weights', self.shape, 'ragged') from None
        if weights.shape != self.shape:
            raise ShapeMismatch('layer weights', self.shape, weights.shape)
        self.weight = weights.copy()

    def get_weights(self):
        return self.weight.copy()

    def __repr__(self):
        return f"Layer(in={self.input_width}, out={self.output_width}, activation={self.activation!r})"
