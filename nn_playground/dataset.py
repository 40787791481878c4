'''
Name: NN Playground
Topic: back-propagation
Author: CHEN, KE-RONG
Date: 2025/08/04
'''
from dataclasses import dataclass, field

import numpy as np


@dataclass(frozen=True)
class TrainingData:
    """
    一筆訓練資料: 輸入向量與期望的輸出向量。
    只用來預測時 vector_out 可以是空的。
    """
    vector_in: tuple
    vector_out: tuple = field(default=())

    def __post_init__(self):
        # 轉成 tuple 保持不可變
        object.__setattr__(self, 'vector_in', tuple(float(v) for v in self.vector_in))
        object.__setattr__(self, 'vector_out', tuple(float(v) for v in self.vector_out))


# 最基本的例子: 永遠由 [3, 4, 5] 得到 [0.1, 0.2, 0.3]
BASIC_DATASET = [
    TrainingData(vector_in=(3, 4, 5), vector_out=(0.1, 0.2, 0.3)),
]

# in: [睡眠時間, 讀書時間]，out: [考試分數]，全部正規化到 [0, 1]
# 睡眠/讀書 1.0 代表 12 小時，分數 1.0 代表 100 分
SLEEPING_LEARNING_DATASET = [
    TrainingData(vector_in=(0.3, 1.0), vector_out=(0.75,)),
    TrainingData(vector_in=(0.5, 0.2), vector_out=(0.82,)),
    TrainingData(vector_in=(1.0, 0.4), vector_out=(0.93,)),
    TrainingData(vector_in=(0.1, 0.89), vector_out=(0.05,)),
    TrainingData(vector_in=(0.14, 0.73), vector_out=(0.22,)),
    TrainingData(vector_in=(0.21, 0.85), vector_out=(0.13,)),
    TrainingData(vector_in=(0.05, 1.0), vector_out=(0.15,)),
    TrainingData(vector_in=(0.34, 0.86), vector_out=(0.45,)),
    TrainingData(vector_in=(0.69, 0.4), vector_out=(0.70,)),
    TrainingData(vector_in=(0.87, 0.1), vector_out=(0.88,)),
    TrainingData(vector_in=(0.75, 0.2), vector_out=(0.96,)),
    TrainingData(vector_in=(0.5, 0.05), vector_out=(0.15,)),
    TrainingData(vector_in=(0.8, 0.45), vector_out=(0.92,)),
    TrainingData(vector_in=(0.96, 0.09), vector_out=(0.53,)),
    TrainingData(vector_in=(0.2, 0.32), vector_out=(0.38,)),
    TrainingData(vector_in=(0.11, 0.79), vector_out=(0.22,)),
    TrainingData(vector_in=(0.61, 0.85), vector_out=(0.93,)),
    TrainingData(vector_in=(0.65, 0.68), vector_out=(0.88,)),
    TrainingData(vector_in=(0.24, 0.16), vector_out=(0.33,)),
    TrainingData(vector_in=(0.94, 0.16), vector_out=(0.23,)),
    TrainingData(vector_in=(0.69, 0.4), vector_out=(0.84,)),
    TrainingData(vector_in=(0.87, 0.19), vector_out=(0.78,)),
    TrainingData(vector_in=(0.74, 0.28), vector_out=(0.96,)),
    TrainingData(vector_in=(0.95, 0.3), vector_out=(0.83,)),
]


def to_arrays(samples):
    """
    把 TrainingData 列表轉成 (X, y) 兩個 np.array，方便繪圖或計算。
    """
    X = np.array([sample.vector_in for sample in samples], dtype=np.float64)
    y = np.array([sample.vector_out for sample in samples], dtype=np.float64)
    return X, y
