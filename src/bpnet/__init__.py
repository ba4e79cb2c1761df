from .activation import (ActivationFunction, Identity, LeakyReLU, ReLU, Sigmoid, Tanh,
                         get_activation)
from .errors import InvalidLabel, NetworkError, ShapeMismatch, TopologyError
from .layer import Layer
from .model import Network

__version__ = '0.1.0'

__all__ = [
    'ActivationFunction', 'Identity', 'LeakyReLU', 'ReLU', 'Sigmoid', 'Tanh', 'get_activation',
    'InvalidLabel', 'NetworkError', 'ShapeMismatch', 'TopologyError',
    'Layer', 'Network',
]
