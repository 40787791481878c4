'''
Name: NN Playground
Topic: back-propagation
Author: CHEN, KE-RONG
Date: 2025/08/04
'''
from .activation import sigmoid, sigmoid_derivative, softmax, unipolar
from .matrix import DimensionError, matrix_difference, matrix_product, outer_like_product, transpose
from .layers import Layer, Neuron
from .dataset import BASIC_DATASET, SLEEPING_LEARNING_DATASET, TrainingData
from .network import Network, NetworkInitParameters
from .loss import MSE
from .trainer import Trainer, TrainingResult
from .config import NetworkConfig, load_config