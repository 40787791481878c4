import threading

import numpy as np
import pytest

from nn_playground.dataset import SLEEPING_LEARNING_DATASET, TrainingData
from nn_playground.loss import MSE
from nn_playground.trainer import Trainer, TrainingResult


def test_mse_loss():
    assert MSE().loss([0.5, 0.5], [0.0, 1.0]) == 0.25
    assert MSE().dataset_loss(None, []) == 0.0


def test_fit_records_loss_per_epoch(sleeping_network):
    trainer = Trainer(sleeping_network, verbose=False)
    result = trainer.fit(SLEEPING_LEARNING_DATASET, 10)

    assert isinstance(result, TrainingResult)
    assert result.epochs_completed == 10
    assert len(result.loss_history) == 10
    assert not result.stopped
    assert result.duration >= 0.0
    assert result.loss_history[-1] == pytest.approx(MSE().dataset_loss(sleeping_network, SLEEPING_LEARNING_DATASET))


def test_fit_matches_network_train(sleeping_network):
    """逐週期訓練與直接呼叫 Network.train 得到相同的權重"""
    initial = [layer.neuron.matrix.copy() for layer in sleeping_network.layers]
    Trainer(sleeping_network, verbose=False).fit(SLEEPING_LEARNING_DATASET, 3)
    trained = [layer.neuron.matrix.copy() for layer in sleeping_network.layers]

    for layer, weights in zip(sleeping_network.layers, initial):
        layer.neuron.matrix = weights.copy()
    sleeping_network.train(SLEEPING_LEARNING_DATASET, 3)

    for expected, layer in zip(trained, sleeping_network.layers):
        np.testing.assert_array_equal(expected, layer.neuron.matrix)


def test_fit_prints_progress(sleeping_network, capsys):
    trainer = Trainer(sleeping_network, verbose=True)
    trainer.fit(SLEEPING_LEARNING_DATASET, 4, log_interval=2)
    out = capsys.readouterr().out
    assert "Epoch 2/4" in out
    assert "Epoch 4/4" in out
    assert "Training finished" in out


def test_fit_silent_when_not_verbose(sleeping_network, capsys):
    Trainer(sleeping_network, verbose=False).fit(SLEEPING_LEARNING_DATASET, 2, log_interval=1)
    assert capsys.readouterr().out == ""


def test_fit_async_calls_back_with_result(sleeping_network):
    done = threading.Event()
    received = []

    def callback(result):
        received.append(result)
        done.set()

    trainer = Trainer(sleeping_network, verbose=False)
    future = trainer.fit_async(SLEEPING_LEARNING_DATASET, 5, callback=callback)
    result = future.result(timeout=60)
    trainer.shutdown()

    assert done.is_set()
    assert received == [result]
    assert result.epochs_completed == 5


def test_stop_interrupts_background_training(sleeping_network):
    trainer = Trainer(sleeping_network, verbose=False)
    epochs = 10 ** 6
    future = trainer.fit_async(SLEEPING_LEARNING_DATASET, epochs)

    with pytest.raises(RuntimeError):
        trainer.fit_async(SLEEPING_LEARNING_DATASET, 1)

    trainer.stop()
    result = future.result(timeout=60)
    trainer.shutdown()

    assert result.stopped
    assert result.epochs_completed < epochs
    assert len(result.loss_history) == result.epochs_completed


def test_background_errors_surface_through_future(sleeping_network):
    trainer = Trainer(sleeping_network, verbose=False)
    future = trainer.fit_async([TrainingData(vector_in=[1.0], vector_out=[0.5])], 1)
    with pytest.raises(ValueError):
        future.result(timeout=60)
    trainer.shutdown()


def test_predict_accepts_vectors(sleeping_network, capsys):
    trainer = Trainer(sleeping_network, verbose=True)
    output = trainer.predict([0.8, 0.3])
    assert output.shape == (1,)
    np.testing.assert_array_equal(output, trainer.predict(TrainingData(vector_in=[0.8, 0.3])))
    assert "raw result" in capsys.readouterr().out


def test_reset_through_trainer(sleeping_network):
    trainer = Trainer(sleeping_network, verbose=False)
    trainer.predict([0.8, 0.3])
    trainer.reset()
    for layer in sleeping_network.layers:
        assert not layer.values.any()


def test_fit_rejected_while_background_training(sleeping_network):
    """背景訓練進行中時，同步 fit 不能清掉尚未生效的 stop()"""
    trainer = Trainer(sleeping_network, verbose=False)
    future = trainer.fit_async(SLEEPING_LEARNING_DATASET, 10 ** 6)
    trainer.stop()

    with pytest.raises(RuntimeError):
        trainer.fit(SLEEPING_LEARNING_DATASET, 1)

    result = future.result(timeout=60)
    trainer.shutdown()
    assert result.stopped


def test_concurrent_fit_async_only_one_accepted(sleeping_network):
    trainer = Trainer(sleeping_network, verbose=False)
    barrier = threading.Barrier(4)
    futures, errors = [], []

    def submit():
        barrier.wait()
        try:
            futures.append(trainer.fit_async(SLEEPING_LEARNING_DATASET, 10 ** 6))
        except RuntimeError as e:
            errors.append(e)

    threads = [threading.Thread(target=submit) for _ in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join(timeout=60)

    trainer.stop()
    for future in futures:
        future.result(timeout=60)
    trainer.shutdown()

    assert len(futures) == 1
    assert len(errors) == 3


def test_fit_allowed_after_background_training_finishes(sleeping_network):
    trainer = Trainer(sleeping_network, verbose=False)
    trainer.fit_async(SLEEPING_LEARNING_DATASET, 1).result(timeout=60)
    assert trainer.fit(SLEEPING_LEARNING_DATASET, 1).epochs_completed == 1
    trainer.shutdown()
