import argparse
import os
import time

import numpy as np
import yaml
from tqdm import tqdm

from .activation import ACTIVATIONS, get_activation
from .data import load_data
from .model import Network
from .utils import plot_loss, show_result

CONFIG_KEYS = {
    'network': ('hidden', 'activation'),
    'training': ('epochs', 'lr', 'seed'),
}


def load_config(path):
    """Flatten the ``network`` / ``training`` sections of a YAML file into argparse defaults."""
    with open(path, 'r') as f:
        cfg = yaml.safe_load(f) or {}

    defaults = {}
    for section, keys in CONFIG_KEYS.items():
        values = cfg.get(section) or {}
        unknown = set(values) - set(keys)
        if unknown:
            raise ValueError(f"Unknown keys in '{section}' section of {path}: {sorted(unknown)}")
        defaults.update(values)
    return defaults


def build_network(num_inputs, num_classes, hidden, activation, rng=None):
    widths = list(hidden) + [num_classes]
    return Network(num_inputs, len(widths), widths, get_activation(activation), rng=rng)


def train(model, x, y, epochs=1000, lr=0.1, rng=None):
    rng = np.random.default_rng() if rng is None else rng
    losses = []
    start_time = time.time()
    with tqdm(range(epochs), desc="Training", unit="epoch") as pbar:
        for epoch in pbar:
            # One SGD step per example, visited in a fresh order every epoch
            for idx in rng.permutation(len(x)):
                model.back_propagation(x[idx], int(y[idx]), lr)
            loss = np.mean([model.compute_mse(x[i], int(y[i])) for i in range(len(x))])
            losses.append(loss)
            pbar.set_postfix(loss=f"{loss:.6f}")
    print(f'Epoch {epochs}, Loss {losses[-1] if losses else float("nan")}')
    print(f'Training finished, elapsed {time.time() - start_time:.2f}s')
    return losses


def test(model, x, y):
    pred_y = np.array([model.predict(x[i]) for i in range(len(x))])
    correct = int(np.sum(pred_y == y))
    print(f'Accuracy: {correct}/{len(y)} = {correct / len(y) * 100}%')
    return pred_y, correct / len(y)


def main(args):
    rng = np.random.default_rng(args.seed)
    x, y = load_data(args.data, rng=rng)
    model = build_network(x.shape[1], 2, args.hidden, args.activation, rng=rng)
    print(f'Model: {model}')

    losses = train(model, x, y, epochs=args.epochs, lr=args.lr, rng=rng)
    pred_y, accuracy = test(model, x, y)

    if args.plot or args.output_path:
        loss_path = result_path = None
        if args.output_path:
            os.makedirs(args.output_path, exist_ok=True)
            tag = f'{args.data}_lr{str(args.lr).replace(".", "")}_{args.activation}_e{args.epochs}'
            loss_path = os.path.join(args.output_path, f'loss_{tag}.png')
            result_path = os.path.join(args.output_path, f'{tag}.png')
        plot_loss(losses, args, loss_path, show=args.plot)
        show_result(x, y, pred_y, result_path, show=args.plot)
    return model, losses, accuracy


def get_parser():
    parser = argparse.ArgumentParser(description="Train a feed-forward network with per-example back-propagation")
    parser.add_argument('--config', type=str, default=None, help='YAML file with network/training sections')
    parser.add_argument('--data', type=str, choices=['linear', 'xor'], default='xor')
    parser.add_argument('--epochs', type=int, default=1000)
    parser.add_argument('--lr', type=float, default=0.05)
    parser.add_argument('--hidden', type=int, nargs='+', default=[8], help='Widths of the hidden layers')
    parser.add_argument('--activation', type=str, choices=sorted(ACTIVATIONS), default='tanh')
    parser.add_argument('--seed', type=int, default=42)
    parser.add_argument('--plot', action='store_true', help='Show the loss curve and predictions')
    parser.add_argument('--output_path', type=str, default=None, help='Directory to save figures in')
    return parser


def parse_args(argv=None):
    parser = get_parser()
    args = parser.parse_args(argv)
    if args.config:
        # Config file replaces the defaults; flags given on the command line still win
        parser.set_defaults(**load_config(args.config))
        args = parser.parse_args(argv)
    return args


def cli(argv=None):
    main(parse_args(argv))


if __name__ == '__main__':
    cli()
