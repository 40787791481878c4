import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import numpy as np  # noqa: E402
import pytest  # noqa: E402

from nn_playground.dataset import TrainingData  # noqa: E402
from nn_playground.network import Network  # noqa: E402


@pytest.fixture(autouse=True)
def seed_random():
    """每個測試都從相同的亂數狀態開始"""
    np.random.seed(1)
    yield
    plt.close("all")


@pytest.fixture
def basic_sample():
    return TrainingData(vector_in=[3, 4, 5], vector_out=[0.1, 0.2, 0.3])


@pytest.fixture
def sleeping_network():
    network = Network(2, 1)
    network.append_hidden_layer(5)
    network.append_hidden_layer(4)
    return network
