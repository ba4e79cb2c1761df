import matplotlib.pyplot as plt


def show_result(x, y, pred_y, output_path=None, show=True):
    fig = plt.figure()
    for k, (title, labels) in enumerate([('Ground truth', y), ('Predict result', pred_y)]):
        plt.subplot(1, 2, k + 1)
        plt.title(title, fontsize=18)
        for i in range(x.shape[0]):
            plt.plot(x[i][0], x[i][1], 'ro' if labels[i] == 0 else 'bo')
    if output_path:
        plt.savefig(output_path)

    if show:
        plt.show()
    plt.close(fig)


def plot_loss(losses, args, output_path=None, show=True):
    fig = plt.figure()
    plt.title(f'Training loss with lr={args.lr}, hidden={args.hidden}, activation={args.activation}')
    plt.plot(losses)
    plt.xlabel('Epoch')
    plt.ylabel('Loss')
    if output_path:
        plt.savefig(output_path)

    if show:
        plt.show()
    plt.close(fig)
