"""Untrained recurrent, convolutional and attention forward passes."""

from .layers import (
    BiLstm,
    Conv1D,
    Dense,
    LstmCell,
    SingleQueryAttention,
    init_weights,
    max_pool,
    relu,
    sigmoid,
    softmax,
)
from .model import HybridSequenceNetwork, StackedLstm, min_max_normalize, z_normalize

__all__ = [
    "BiLstm",
    "Conv1D",
    "Dense",
    "HybridSequenceNetwork",
    "LstmCell",
    "SingleQueryAttention",
    "StackedLstm",
    "init_weights",
    "max_pool",
    "min_max_normalize",
    "relu",
    "sigmoid",
    "softmax",
    "z_normalize",
]
