'''
Name: NN Playground
Topic: back-propagation
Author: CHEN, KE-RONG
Date: 2025/08/04
'''
import argparse
import numpy as np

from nn_playground.config import NetworkConfig, load_config
from nn_playground.dataset import BASIC_DATASET, SLEEPING_LEARNING_DATASET, TrainingData
from nn_playground.network import Network
from nn_playground.trainer import Trainer
from show_result import plot_loss_curve, show_result

# 每個範例的預設設定
EXAMPLES = {
    'basic': {
        'dataset': BASIC_DATASET,
        'config': NetworkConfig(input_size=3, output_size=3, hidden_layers=[5], epochs=5000),
        'test_input': [3.0, 4.0, 5.0],
    },
    'sleeping': {
        'dataset': SLEEPING_LEARNING_DATASET,
        'config': NetworkConfig(input_size=2, output_size=1, hidden_layers=[5, 4], epochs=1000),
        'test_input': [0.8, 0.3],
    },
}


def build_parser():
    parser = argparse.ArgumentParser(description='NN Playground: feed-forward back-propagation')
    parser.add_argument('--example', type=str, default='basic', choices=list(EXAMPLES),
                        help='example dataset to train on (default: basic)')
    parser.add_argument('--config', type=str, default=None, metavar='PATH',
                        help='YAML file with input_size, output_size, hidden_layers, epochs, seed, log_interval')
    parser.add_argument('--epochs', type=int, default=None, metavar='N',
                        help='number of epochs to train (default: 5000 for basic, 1000 for sleeping)')
    parser.add_argument('--hidden-dims', type=int, nargs='*', default=None,
                        help='sizes of hidden layers (default: 5 for basic, 5 4 for sleeping)')
    parser.add_argument('--seed', type=int, default=None, metavar='S',
                        help='random seed (default: 1)')
    parser.add_argument('--log-interval', type=int, default=None, metavar='N',
                        help='how many epochs to wait before logging training status')
    parser.add_argument('--test-input', type=float, nargs='+', default=None,
                        help='input vector to test after training')
    parser.add_argument('--no-plot', action='store_true',
                        help='do not show matplotlib figures')
    return parser


def resolve_config(args, parser):
    """
    合併範例預設值、YAML 設定檔與命令列參數，命令列優先。
    """
    example = EXAMPLES[args.example]
    if args.config:
        try:
            config = load_config(args.config)
        except (OSError, ValueError) as e:
            parser.error(f"無法讀取設定檔 {args.config}: {e}")
    else:
        default = example['config']
        config = NetworkConfig(
            input_size=default.input_size,
            output_size=default.output_size,
            hidden_layers=list(default.hidden_layers),
            epochs=default.epochs,
            seed=1,
            log_interval=default.log_interval,
        )

    try:
        if args.hidden_dims is not None:
            config.hidden_layers = args.hidden_dims
        if args.epochs is not None:
            config.epochs = args.epochs
        if args.seed is not None:
            config.seed = args.seed
        if args.log_interval is not None:
            config.log_interval = args.log_interval
        # 重新檢查覆寫後的數值
        config = NetworkConfig(**vars(config))
    except ValueError as e:
        parser.error(str(e))

    sample = example['dataset'][0]
    if (config.input_size, config.output_size) != (len(sample.vector_in), len(sample.vector_out)):
        parser.error(f"網路大小 ({config.input_size} -> {config.output_size}) 與 {args.example} 資料集不符")
    return config


def run(argv=None):
    """
    解析命令列參數、建構網路並執行訓練。

    返回:
        tuple: 訓練後的 Network 與 TrainingResult。
    """
    # --- 命令列參數解析 ---
    parser = build_parser()
    args = parser.parse_args(argv)
    config = resolve_config(args, parser)
    if config.seed is not None:
        np.random.seed(config.seed)

    example = EXAMPLES[args.example]
    dataset = example['dataset']
    test_input = args.test_input if args.test_input is not None else example['test_input']
    if len(test_input) != config.input_size:
        parser.error(f"--test-input 需要 {config.input_size} 個數值")
    print(f"使用範例: {args.example}")

    # --- 網路建構 ---
    print("\n開始建構網路...")
    network = Network.from_parameters(config.to_parameters())
    print(f"網路結構: {network.layer_sizes}")

    # --- 網路訓練 ---
    trainer = Trainer(network)
    print(f"\n開始訓練... (Epochs: {config.epochs}, Samples: {len(dataset)})")
    result = trainer.fit(dataset, config.epochs, config.log_interval)

    # --- 結果顯示 ---
    print("\n訓練完成！測試網路...")
    prediction = trainer.predict(TrainingData(vector_in=test_input))
    print(f"Input: {list(test_input)} -> Output: [{', '.join(f'{v:.4f}' for v in prediction)}]")

    if not args.no_plot:
        plot_loss_curve(result.loss_history)
        show_result(network, dataset)

    return network, result


def main(argv=None):
    """
    主函式，命令列進入點。
    """
    run(argv)


if __name__ == '__main__':
    main()
