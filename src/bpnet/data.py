import numpy as np


def generate_linear(n=100, rng=None):
    """Points in the unit square, labelled 0 below the diagonal and 1 above it."""
    rng = np.random.default_rng() if rng is None else rng
    pts = rng.uniform(0, 1, (n, 2))
    labels = np.where(pts[:, 0] > pts[:, 1], 0, 1)
    return pts, labels


def generate_XOR_easy():
    inputs = []
    labels = []
    for i in range(11):
        inputs.append([0.1 * i, 0.1 * i])
        labels.append(0)

        # the two diagonals cross at the centre
        if i == 5:
            continue

        inputs.append([0.1 * i, 1 - 0.1 * i])
        labels.append(1)
    return np.array(inputs), np.array(labels)


def load_data(name, n=100, rng=None):
    if name == 'linear':
        return generate_linear(n, rng=rng)
    elif name == 'xor':
        return generate_XOR_easy()
    raise ValueError(f"Invalid data '{name}'")
