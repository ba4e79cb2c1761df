import numpy as np

from .activation import Identity
from .errors import ShapeMismatch, TopologyError
from .layer import Layer
from .loss import SquaredError, bipolar_target, check_label


class Network:
    """Fully connected feed-forward network trained one example at a time.

    Every layer except the last uses ``transfer_function``; the last layer
    always uses :class:`Identity`, so the outputs are raw scores compared
    against a bipolar one-hot target (+1 for the label, -1 elsewhere).

    Args:
        num_inputs: Dimension of the input vector.
        num_layers: Number of layers, at least 2.
        num_nodes_per_layers: Width of each layer, ``num_layers`` entries.
        transfer_function: Activation of the interior layers. It is not
            applied to the last layer.
        derivative: Derivative of ``transfer_function``. Defaults to
            ``transfer_function.derivative()``.
        dtype: NumPy dtype of weights and buffers.
        rng: ``numpy.random.Generator`` used for the initial weights.
    """

    def __init__(self, num_inputs, num_layers, num_nodes_per_layers, transfer_function,
                 derivative=None, dtype=np.float64, rng=None):
        if num_layers <= 1:
            raise TopologyError(f"a network needs at least 2 layers, got {num_layers}")
        if len(num_nodes_per_layers) != num_layers:
            raise TopologyError(
                f"expected {num_layers} layer widths, got {len(num_nodes_per_layers)}")
        if num_inputs <= 0 or any(n <= 0 for n in num_nodes_per_layers):
            raise TopologyError("input dimension and layer widths must be positive")
        if not np.issubdtype(np.dtype(dtype), np.floating):
            raise TopologyError(f"dtype must be a floating point type, got {np.dtype(dtype)}")

        self.num_inputs = num_inputs
        self.num_layers = num_layers
        self.num_nodes_per_layers = tuple(num_nodes_per_layers)
        self.transfer_function = transfer_function
        self.derivative = transfer_function.derivative() if derivative is None else derivative
        self.dtype = np.dtype(dtype)
        self.loss_fn = SquaredError()

        rng = np.random.default_rng() if rng is None else rng
        widths = (num_inputs,) + self.num_nodes_per_layers
        self._layers = []
        for l in range(num_layers):
            activation = Identity() if l == num_layers - 1 else transfer_function
            self._layers.append(Layer(widths[l], widths[l + 1], activation, dtype=self.dtype, rng=rng))

        # Buffers live as long as the network and are only ever written in place
        self.delta = [np.zeros(n, dtype=self.dtype) for n in self.num_nodes_per_layers]
        self.activations = [np.zeros(n, dtype=self.dtype) for n in self.num_nodes_per_layers]
        self.temp_weights = [layer.get_weights() for layer in self._layers]

    @property
    def layers(self):
        return tuple(self._layers)

    @property
    def num_outputs(self):
        return self.num_nodes_per_layers[-1]

    def set_weights(self, weights):
        if len(weights) != self.num_layers:
            raise ShapeMismatch('network weights', self.num_layers, len(weights))
        # Validate everything first so a bad matrix leaves the network untouched
        matrices = []
        for layer, w in zip(self._layers, weights):
            try:
                w = np.asarray(w, dtype=self.dtype)
            except ValueError:
                raise ShapeMismatch('layer weights', layer.shape, 'ragged') from None
            if w.shape != layer.shape:
                raise ShapeMismatch('layer weights', layer.shape, w.shape)
            matrices.append(w)

        for l, (layer, w) in enumerate(zip(self._layers, matrices)):
            layer.set_weights(w)
            self.temp_weights[l][...] = w

    def get_weights(self):
        return [layer.get_weights() for layer in self._layers]

    def _check_inputs(self, inputs):
        x = np.asarray(inputs, dtype=self.dtype)
        if x.shape != (self.num_inputs,):
            raise ShapeMismatch('inputs', (self.num_inputs,), x.shape)
        return x

    def _forward(self, inputs, record=False):
        x = self._check_inputs(inputs)
        for l, layer in enumerate(self._layers):
            x = layer.compute_outputs(x)
            if record:
                self.activations[l][...] = layer.get_activations()
        return x

    def feed_forward(self, inputs):
        """Return the output scores for ``inputs`` without touching the training buffers."""
        return self._forward(inputs)

    def predict(self, inputs):
        return int(np.argmax(self.feed_forward(inputs)))

    def compute_mse(self, inputs, label):
        target = bipolar_target(label, self.num_outputs, dtype=self.dtype)
        return self.loss_fn.forward(self.feed_forward(inputs), target)

    def compute_activations(self, inputs):
        """Forward pass that caches every layer's pre-activations in ``self.activations``."""
        self._forward(inputs, record=True)

    def compute_sensitivity(self, weights, label):
        last = self.num_layers - 1
        target = bipolar_target(label, self.num_outputs, dtype=self.dtype)
        # Output layer is linear, so there is no derivative factor
        self.delta[last][...] = self.loss_fn.gradient(self.activations[last], target)

        for l in range(last - 1, -1, -1):
            # weights[l + 1][j][i] connects node i of layer l to node j of layer l + 1
            self.delta[l][...] = (np.asarray(weights[l + 1]).T @ self.delta[l + 1]) * self.derivative(self.activations[l])

    def update_weights(self, inputs, epsilon):
        x = self._check_inputs(inputs)
        for l in range(self.num_layers):
            upstream = x if l == 0 else self.transfer_function(self.activations[l - 1])
            self.temp_weights[l] -= epsilon * np.outer(self.delta[l], upstream)

        for layer, w in zip(self._layers, self.temp_weights):
            layer.set_weights(w)

    def back_propagation(self, inputs, label, epsilon):
        """One stochastic gradient descent step on a single ``(inputs, label)`` pair."""
        # Reject bad arguments before any buffer is overwritten
        check_label(label, self.num_outputs)
        self._check_inputs(inputs)
        # Layers may have been changed directly through `layers`
        for l, layer in enumerate(self._layers):
            self.temp_weights[l][...] = layer.weight
        self.compute_activations(inputs)
        self.compute_sensitivity(self.temp_weights, label)
        self.update_weights(inputs, epsilon)

    def __repr__(self):
        return f"Network(layers=[{', '.join(str(layer) for layer in self._layers)}])"
