import numpy as np
import pytest

from nn_playground.layers import Layer, Neuron


def test_neuron_starts_with_default_value():
    neuron = Neuron(2, 3)
    assert neuron.matrix.shape == (2, 3)
    assert not neuron.matrix.any()
    assert (Neuron(1, 1, default_value=0.5).matrix == 0.5).all()


def test_randomize_matrix_uses_discrete_range():
    neuron = Neuron(20, 30)
    neuron.randomize_matrix()
    values = np.unique(neuron.matrix)
    assert values.min() >= -5.0
    assert values.max() <= 4.0
    assert set(values.tolist()) <= set(float(v) for v in range(-5, 5))
    # 600 個值幾乎不可能全部一樣
    assert len(values) > 1


@pytest.mark.parametrize("rows, columns", [(-1, 2), (2, -3), (1.5, 2), ("2", 2)])
def test_neuron_rejects_invalid_sizes(rows, columns):
    with pytest.raises(ValueError):
        Neuron(rows, columns)


def test_layer_randomizes_neuron_and_zeroes_values():
    layer = Layer(Neuron(3, 4))
    assert layer.size == 4
    np.testing.assert_array_equal(layer.values, np.zeros(4))
    assert layer.neuron.matrix.shape == (3, 4)
    assert np.isfinite(layer.neuron.matrix).all()


def test_layer_reset():
    layer = Layer(Neuron(10, 10))
    layer.values = np.ones(10)
    before = layer.neuron.matrix.copy()
    layer.reset()
    np.testing.assert_array_equal(layer.values, np.zeros(10))
    assert not np.array_equal(before, layer.neuron.matrix)


def test_repr_describes_sizes():
    layer = Layer(Neuron(1, 2))
    assert "size=2" in repr(layer)
    assert "rows=1, columns=2" in repr(layer.neuron)
