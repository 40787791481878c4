'''
Name: NN Playground
Topic: back-propagation
Author: CHEN, KE-RONG
Date: 2025/08/04
'''
import numbers
from dataclasses import dataclass, field

import numpy as np

from .activation import SIGMOID_BETA, sigmoid, sigmoid_derivative
from .dataset import TrainingData
from .layers import Layer, Neuron, check_size
from .matrix import DimensionError, matrix_difference, matrix_product, outer_like_product, transpose


@dataclass(frozen=True)
class NetworkInitParameters:
    """建立網路所需的參數: 輸入大小、輸出大小、各隱藏層大小。"""
    input_size: int
    output_size: int
    hidden_layers_sizes: tuple = field(default=())


class Network:
    """
    全連接前饋神經網路。

    layers[0] 只是輸入層的佔位 (rows=0, columns=size_in)，不參與運算；
    最後一層是輸出層 (columns=size_out)；中間是隱藏層。
    每一層的 neuron.rows 都等於前一層的 neuron.columns。
    """
    def __init__(self, size_in, size_out):
        """
        初始化網路，只有輸入佔位層與輸出層。

        參數:
            size_in (int): 輸入向量長度。
            size_out (int): 輸出向量長度。
        """
        self.size_in = check_size(size_in, 'size_in')
        self.size_out = check_size(size_out, 'size_out')
        self.layers = [
            Layer(Neuron(0, self.size_in)),
            Layer(Neuron(self.size_in, self.size_out)),
        ]
        self._observers = []

    @classmethod
    def from_parameters(cls, params):
        """依照 NetworkInitParameters 建立網路並依序加入隱藏層。"""
        network = cls(params.input_size, params.output_size)
        for size in params.hidden_layers_sizes:
            network.append_hidden_layer(size)
        return network

    # --- 結構 ---

    @property
    def layer_sizes(self):
        """每一層的神經元數量，包含輸入層與輸出層"""
        return [layer.size for layer in self.layers]

    @property
    def hidden_layer_sizes(self):
        return self.layer_sizes[1:-1]

    def add_observer(self, callback):
        """
        註冊結構變更的回呼，加入或移除隱藏層時會以新的 layer_sizes 呼叫。
        """
        self._observers.append(callback)

    def remove_observer(self, callback):
        self._observers.remove(callback)

    def _notify(self):
        sizes = self.layer_sizes
        for callback in list(self._observers):
            callback(sizes)

    def append_hidden_layer(self, size):
        """
        在輸出層之前加入一層隱藏層。
        輸出層會以新的 rows 重新建立，原本輸出層的權重會被丟棄。

        參數:
            size (int): 新隱藏層的神經元數量。
        """
        size = check_size(size, 'size')
        previous = self.layers[-2].size
        self.layers[-1:] = [
            Layer(Neuron(previous, size)),
            Layer(Neuron(size, self.size_out)),
        ]
        self._notify()

    def remove_hidden_layer(self, index):
        """
        移除第 index 層隱藏層 (1 <= index < len(layers) - 1)。
        原本接在後面的那一層會以新的 rows 重新建立。
        """
        if isinstance(index, bool) or not isinstance(index, numbers.Integral):
            raise ValueError(f"index 必須是整數，收到: {index!r}")
        if not 1 <= index < len(self.layers) - 1:
            raise ValueError(f"沒有第 {index} 層隱藏層，目前隱藏層: {self.hidden_layer_sizes}")
        del self.layers[index]
        following = self.layers[index]
        self.layers[index] = Layer(Neuron(self.layers[index - 1].size, following.size))
        self._notify()

    # --- 運算 ---

    def propagate(self, sample):
        """
        執行完整的前向傳播，並把每一層活化後的輸出存到 layer.values。

        參數:
            sample (TrainingData): 只會用到 vector_in。

        返回:
            np.array: 長度為 size_out 的輸出向量。
        """
        vector = np.asarray(sample.vector_in, dtype=np.float64)
        if vector.shape != (self.size_in,):
            raise DimensionError(f"輸入向量長度為 {vector.size}，網路需要 {self.size_in}")

        # 跳過第 0 層佔位
        for layer in self.layers[1:]:
            vector = matrix_product(vector[np.newaxis, :], layer.neuron.matrix)[0]
            vector = sigmoid(SIGMOID_BETA, vector)
            layer.values = vector
        return vector

    def calculate_error(self, sample):
        """期望輸出減去實際輸出 (expected - propagate(sample))"""
        expected = np.asarray(sample.vector_out, dtype=np.float64)
        if expected.shape != (self.size_out,):
            raise DimensionError(f"輸出向量長度為 {expected.size}，網路需要 {self.size_out}")
        return expected - self.propagate(sample)

    def back_propagate(self, sample):
        """
        對單筆資料執行一次反向傳播 (梯度下降，學習率為 1)。
        由輸出層往回更新到第 1 層，第 0 層佔位沒有權重。
        """
        error = self.calculate_error(sample)

        for index in range(len(self.layers) - 1, 0, -1):
            layer = self.layers[index]
            previous_values = self.layers[index - 1].values
            weights = layer.neuron.matrix

            delta = error * sigmoid_derivative(layer.values)
            # 誤差使用更新前的權重往回傳
            error = matrix_product(delta[np.newaxis, :], transpose(weights))[0]

            weight_delta = outer_like_product(previous_values[np.newaxis, :], transpose(delta[np.newaxis, :]))
            layer.neuron.matrix = matrix_difference(weights, transpose(weight_delta))

    def train(self, samples, epochs=500):
        """
        依序對每筆資料做反向傳播，重複 epochs 次。不打亂順序也不提前停止。

        參數:
            samples (list): TrainingData 列表。
            epochs (int): 訓練週期數。
        """
        epochs = check_size(epochs, 'epochs')
        samples = list(samples)
        for _ in range(epochs):
            for sample in samples:
                self.back_propagate(sample)

    def predict(self, vector_in):
        """以單純的輸入向量做預測"""
        return self.propagate(TrainingData(vector_in=vector_in))

    def reset(self):
        """清空每一層的輸出並重新隨機初始化權重，保留網路結構"""
        for layer in self.layers:
            layer.reset()

    def __repr__(self):
        return f"Network(layer_sizes={self.layer_sizes}, layers={self.layers!r})"
