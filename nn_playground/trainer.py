'''
Name: NN Playground
Topic: back-propagation
Author: CHEN, KE-RONG
Date: 2025/08/04
'''
import threading
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field

# 進度條函式庫
from tqdm import tqdm

from .dataset import TrainingData
from .layers import check_size
from .loss import MSE


@dataclass
class TrainingResult:
    """一次訓練的結果"""
    loss_history: list = field(default_factory=list)
    epochs_completed: int = 0
    duration: float = 0.0
    stopped: bool = False


class Trainer:
    """
    訓練器類別，負責執行網路的訓練迴圈。

    Network 本身沒有任何鎖，所有經過 Trainer 的操作 (fit / predict / reset)
    都會先取得同一把鎖，確保同一時間只有一個操作在讀寫網路。
    """
    def __init__(self, network, loss_fn=None, verbose=True):
        """
        初始化訓練器。

        參數:
            network: 要訓練的 Network 物件。
            loss_fn: 量測訓練進度用的損失函數物件，預設為 MSE。
            verbose (bool): 是否顯示進度條與訓練日誌。
        """
        self.network = network
        self.loss_fn = loss_fn if loss_fn is not None else MSE()
        self.verbose = verbose
        self._lock = threading.Lock()
        # 保護 _future 與 _fitting 的檢查與設定
        self._submit_lock = threading.Lock()
        self._fitting = False
        self._stop_event = threading.Event()
        self._executor = None
        self._future = None

    def fit(self, samples, epochs, log_interval=1000):
        """
        執行訓練迴圈，每個週期結束後都可以被 stop() 中斷。

        參數:
            samples (list): TrainingData 列表。
            epochs (int): 訓練週期數。
            log_interval (int): 輸出日誌的間隔週期數，0 代表不輸出。

        返回:
            TrainingResult: 每個週期的損失值、完成的週期數與花費時間。
        """
        with self._submit_lock:
            self._check_idle()
            self._fitting = True
            self._stop_event.clear()
        try:
            return self._run(list(samples), epochs, log_interval)
        finally:
            with self._submit_lock:
                self._fitting = False

    def _check_idle(self):
        if self._fitting or (self._future is not None and not self._future.done()):
            raise RuntimeError("已經有一個訓練正在執行")

    def _run(self, samples, epochs, log_interval):
        epochs = check_size(epochs, 'epochs')
        log_interval = check_size(log_interval, 'log_interval')
        result = TrainingResult()

        start = time.perf_counter()
        with self._lock:
            for epoch in tqdm(range(epochs), desc="Training Progress", disable=not self.verbose):
                if self._stop_event.is_set():
                    result.stopped = True
                    break

                # 1. 每筆資料做一次反向傳播
                self.network.train(samples, 1)

                # 2. 計算這個週期結束後的損失
                loss = self.loss_fn.dataset_loss(self.network, samples)
                result.loss_history.append(loss)
                result.epochs_completed = epoch + 1

                if self.verbose and log_interval and (epoch + 1) % log_interval == 0:
                    print(f"Epoch {epoch+1}/{epochs}, Loss: {loss:.6f}")
        result.duration = time.perf_counter() - start

        if self.verbose:
            print(f"Training finished in {result.duration:.4f} s ({result.epochs_completed} epochs)")
        return result

    def fit_async(self, samples, epochs, log_interval=1000, callback=None):
        """
        在背景執行緒執行 fit，立即回傳 Future。
        訓練完成後若有提供 callback，會以 TrainingResult 呼叫它。
        同一時間只允許一個訓練，包含同步的 fit。
        """
        samples = list(samples)

        def worker():
            result = self._run(samples, epochs, log_interval)
            if callback is not None:
                callback(result)
            return result

        with self._submit_lock:
            self._check_idle()
            if self._executor is None:
                self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="nn-trainer")
            self._stop_event.clear()
            self._future = self._executor.submit(worker)
            return self._future

    def stop(self):
        """要求停止目前的訓練，會在下一個週期開始前生效。"""
        self._stop_event.set()

    def predict(self, sample):
        """
        使用網路進行預測。

        參數:
            sample: TrainingData 或單純的輸入向量。

        返回:
            np.array: 網路的輸出。
        """
        if not isinstance(sample, TrainingData):
            sample = TrainingData(vector_in=sample)
        with self._lock:
            result = self.network.propagate(sample)
        if self.verbose:
            print(f"Testing neural network raw result: {result.tolist()}")
        return result

    def reset(self):
        with self._lock:
            self.network.reset()

    def shutdown(self, wait=True):
        if self._executor is not None:
            self._executor.shutdown(wait=wait)
            self._executor = None
