'''
Name: NN Playground
Topic: back-propagation
Author: CHEN, KE-RONG
Date: 2025/08/04
'''
import numbers

import numpy as np


def check_size(value, name):
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise ValueError(f"{name} 必須是整數，收到: {value!r}")
    if value < 0:
        raise ValueError(f"{name} 不可為負數，收到: {value}")
    return int(value)


class Neuron:
    """
    一組神經元的權重矩陣 (rows x columns)。
    rows 是前一層的神經元數量，columns 是這一層的神經元數量。
    """
    def __init__(self, rows, columns, default_value=0.0):
        self.rows = check_size(rows, 'rows')
        self.columns = check_size(columns, 'columns')
        self.matrix = np.full((self.rows, self.columns), default_value, dtype=np.float64)

    def randomize_matrix(self):
        """
        以 [-5, 4] 之間的整數重新初始化權重 (共 10 種可能的值)。
        """
        self.matrix = np.random.randint(0, 10, size=(self.rows, self.columns)).astype(np.float64) - 5.0

    def __repr__(self):
        return f"Neuron(rows={self.rows}, columns={self.columns}, matrix={self.matrix.tolist()})"


class Layer:
    """
    神經網路層，包含一個 Neuron 以及該層最近一次活化後的輸出 values。
    建立時會自動將權重隨機初始化。
    """
    def __init__(self, neuron):
        self.neuron = neuron
        self.neuron.randomize_matrix()
        self.values = np.zeros(neuron.columns)

    @property
    def size(self):
        """這一層的神經元數量"""
        return self.neuron.columns

    def reset(self):
        """清空輸出並重新隨機初始化權重"""
        self.values = np.zeros(self.neuron.columns)
        self.neuron.randomize_matrix()

    def __repr__(self):
        return f"Layer(size={self.size}, neuron={self.neuron!r})"
