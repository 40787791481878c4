'''
Name: NN Playground
Topic: back-propagation
Author: CHEN, KE-RONG
Date: 2025/08/04
'''

'''
Activation function
unipolar
sigmoid (beta = -1 in the network)
sigmoid_derivative
softmax
'''
import numpy as np

# 網路中所有層都使用 beta = -1，也就是 1 / (1 + e^x)
SIGMOID_BETA = -1.0


def unipolar(a, x):
    """
    單極性階梯函數，x >= a 時輸出 1，否則輸出 0。
    """
    return np.where(np.asarray(x) >= a, 1.0, 0.0)


def sigmoid(beta, x):
    """
    Sigmoid 活化函數 1 / (1 + e^(-beta * x))。

    參數:
        beta (float): 斜率參數，網路中固定為 SIGMOID_BETA。
        x (float or np.array): 輸入訊號。

    返回:
        與 x 相同形狀的活化結果。
    """
    # e^x 溢位時結果會收斂到 0，不需要警告
    with np.errstate(over='ignore'):
        return 1.0 / (1.0 + np.exp(-beta * np.asarray(x, dtype=np.float64)))


def sigmoid_derivative(x):
    """
    Sigmoid 的導數捷徑 x * (1 - x)。
    注意 x 必須是已經活化過的值，而不是活化前的訊號。
    """
    x = np.asarray(x, dtype=np.float64)
    return x * (1.0 - x)


def softmax(vector, x):
    """計算 e^x / sum(e^v_i)，預設的前向傳播不會用到。"""
    return np.exp(x) / np.sum(np.exp(np.asarray(vector, dtype=np.float64)))
