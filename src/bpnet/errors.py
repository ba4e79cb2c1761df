class NetworkError(ValueError):
    """Base class for every precondition failure raised by the network."""


class TopologyError(NetworkError):
    pass


class ShapeMismatch(NetworkError):
    def __init__(self, what, expected, got):
        self.what = what
        self.expected = expected
        self.got = got
        super().__init__(f"{what}: expected shape {expected}, got {got}")


class InvalidLabel(NetworkError):
    def __init__(self, label, num_classes):
        self.label = label
        self.num_classes = num_classes
        super().__init__(f"label {label!r} is not in [0, {num_classes})")
