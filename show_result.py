'''
Name: NN Playground
Topic: back-propagation
Author: CHEN, KE-RONG
Date: 2025/08/04
'''
import matplotlib.pyplot as plt
import numpy as np

from nn_playground.dataset import to_arrays


def plot_loss_curve(loss_history):
    """
    繪製訓練損失曲線。

    參數:
        loss_history (list): 包含每個 epoch 損失值的列表。
    """
    plt.figure()
    plt.plot(loss_history)
    plt.title("Training Loss Curve")
    plt.xlabel("Epoch")
    plt.ylabel("Loss")
    plt.grid(True)
    plt.show()


def show_result(network, samples):
    """
    比較期望輸出與網路的預測結果，並計算平均絕對誤差。

    參數:
        network: 訓練好的 Network 物件。
        samples (list): TrainingData 列表。

    返回:
        float: 平均絕對誤差。
    """
    _, y_true = to_arrays(samples)
    y_pred = np.array([network.propagate(sample) for sample in samples])

    plt.figure(figsize=(12, 6))

    # 每個輸出各自比較
    for k in range(y_true.shape[1]):
        plt.subplot(1, y_true.shape[1], k + 1)
        plt.title(f"Output {k}", fontsize=16)
        plt.scatter(range(len(samples)), y_true[:, k], c='red', marker='o', label='Expected')
        plt.scatter(range(len(samples)), y_pred[:, k], c='blue', marker='x', label='Prediction')
        plt.xlabel("Sample")
        plt.ylabel("Value")
        plt.ylim(0, 1)
        plt.legend()
        plt.grid(True)

    plt.tight_layout()
    plt.show()

    # 計算並顯示平均絕對誤差
    mae = float(np.mean(np.abs(y_pred - y_true)))
    print(f"Mean absolute error: {mae:.4f}")
    return mae
