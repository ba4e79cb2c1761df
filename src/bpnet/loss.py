import numbers

import numpy as np

from .errors import InvalidLabel


def check_label(label, num_classes):
    # bool is an int subclass but never a class index
    if isinstance(label, bool) or not isinstance(label, numbers.Integral):
        raise InvalidLabel(label, num_classes)
    if not 0 <= label < num_classes:
        raise InvalidLabel(label, num_classes)
    return int(label)


def bipolar_target(label, num_classes, dtype=np.float64):
    """One-hot target with +1 at ``label`` and -1 everywhere else."""
    label = check_label(label, num_classes)
    target = -np.ones(num_classes, dtype=dtype)
    target[label] = 1
    return target


class Loss:
    def forward(self, y_pred, y_true):
        raise NotImplementedError

    def gradient(self, y_pred, y_true):
        raise NotImplementedError


class SquaredError(Loss):
    """Squared error summed over output nodes (no averaging). Stateless."""

    def forward(self, y_pred, y_true):
        return float(np.sum((y_pred - y_true) ** 2))

    def gradient(self, y_pred, y_true):
        return 2 * (y_pred - y_true)
