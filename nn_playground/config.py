'''
Name: NN Playground
Topic: back-propagation
Author: CHEN, KE-RONG
Date: 2025/08/04
'''
from dataclasses import dataclass, field

import yaml

from .layers import check_size
from .network import NetworkInitParameters

# np.random.seed 接受的最大值
MAX_SEED = 2 ** 32 - 1


@dataclass
class NetworkConfig:
    """網路結構與訓練設定，可以由 YAML 檔讀入。"""
    input_size: int
    output_size: int
    hidden_layers: list = field(default_factory=list)
    epochs: int = 500
    seed: int = None
    log_interval: int = 1000

    def __post_init__(self):
        self.input_size = check_size(self.input_size, 'input_size')
        self.output_size = check_size(self.output_size, 'output_size')
        if self.hidden_layers is None:
            self.hidden_layers = []
        if not isinstance(self.hidden_layers, (list, tuple)):
            raise ValueError(f"hidden_layers 必須是列表，收到: {self.hidden_layers!r}")
        self.hidden_layers = [check_size(size, 'hidden_layers') for size in self.hidden_layers]
        self.epochs = check_size(self.epochs, 'epochs')
        self.log_interval = check_size(self.log_interval, 'log_interval')
        if self.seed is not None:
            self.seed = check_size(self.seed, 'seed')
            if self.seed > MAX_SEED:
                raise ValueError(f"seed 必須介於 0 和 {MAX_SEED} 之間，收到: {self.seed}")

    def to_parameters(self):
        return NetworkInitParameters(
            input_size=self.input_size,
            output_size=self.output_size,
            hidden_layers_sizes=tuple(self.hidden_layers),
        )


def load_config(path):
    """
    讀取 YAML 設定檔。

    參數:
        path (str): 設定檔路徑。

    返回:
        NetworkConfig: 解析後的設定。
    """
    with open(path, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f)

    if not isinstance(data, dict):
        raise ValueError(f"設定檔格式錯誤: {path}")

    missing = [key for key in ('input_size', 'output_size') if key not in data]
    if missing:
        raise ValueError(f"設定檔缺少欄位: {', '.join(missing)}")

    known = set(NetworkConfig.__dataclass_fields__)
    unknown = sorted(set(data) - known)
    if unknown:
        raise ValueError(f"未知的設定欄位: {', '.join(unknown)}")

    return NetworkConfig(**data)
