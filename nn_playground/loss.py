'''
Name: NN Playground
Topic: back-propagation
Author: CHEN, KE-RONG
Date: 2025/08/04
'''

'''
Loss function
Mean Squared Error(mse)
只用來量測訓練進度，權重更新本身直接使用 expected - output
'''
import numpy as np


class Loss:
    def loss(self, predicted, actual):
        raise NotImplementedError("loss() 尚未實作")


class MSE(Loss):
    """
    均方誤差 (Mean Squared Error) 損失函數。
    """
    def loss(self, predicted, actual):
        """
        計算均方誤差。
        """
        predicted = np.asarray(predicted, dtype=np.float64)
        actual = np.asarray(actual, dtype=np.float64)
        return float(np.mean((predicted - actual) ** 2))

    def dataset_loss(self, network, samples):
        """
        對整個資料集計算平均損失。

        參數:
            network: 要評估的 Network 物件。
            samples (list): TrainingData 列表。

        返回:
            float: 所有資料的平均均方誤差。
        """
        if not samples:
            return 0.0
        losses = [self.loss(network.propagate(sample), sample.vector_out) for sample in samples]
        return float(np.mean(losses))
