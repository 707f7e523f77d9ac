"""Composed forward passes used by the network-style strategies."""

import numpy as np

from .layers import BiLstm, Conv1D, Dense, LstmCell, SingleQueryAttention, max_pool


def min_max_normalize(values: np.ndarray) -> tuple[np.ndarray, float, float]:
    """Scale to [0, 1]. A flat window uses a range of 1.

    Returns:
        Tuple of (normalized, minimum, range)
    """
    values = np.asarray(values, dtype=float)
    lo = float(np.min(values))
    span = float(np.max(values)) - lo or 1.0
    return (values - lo) / span, lo, span


def z_normalize(values: np.ndarray) -> tuple[np.ndarray, float, float]:
    """Standardize to zero mean and unit variance. A flat window uses sd 1.

    Returns:
        Tuple of (normalized, mean, std)
    """
    values = np.asarray(values, dtype=float)
    mu = float(np.mean(values))
    sd = float(np.std(values)) or 1.0
    return (values - mu) / sd, mu, sd


class StackedLstm:
    """Stack of LSTM cells with a random linear read-out of the final hidden state."""

    def __init__(
        self,
        rng: np.random.Generator,
        hidden_size: int = 32,
        layers: int = 2,
        input_size: int = 1,
    ) -> None:
        self.cells = [
            LstmCell(input_size if i == 0 else hidden_size, hidden_size, rng) for i in range(layers)
        ]
        self.readout = Dense(hidden_size, 1, rng)

    def forward(self, sequence: np.ndarray) -> float:
        """Feed the sequence through every layer in lockstep and read out a scalar."""
        states = [cell.initial_state() for cell in self.cells]
        hidden = np.zeros(self.cells[-1].hidden_size)
        for x in np.asarray(sequence, dtype=float):
            layer_input = np.atleast_1d(x)
            for i, cell in enumerate(self.cells):
                hidden, c = cell.step(layer_input, *states[i])
                states[i] = (hidden, c)
                layer_input = hidden
        return float(self.readout.forward(hidden)[0])


class HybridSequenceNetwork:
    """BiLSTM -> Conv1D + max-pool -> single-query attention -> mean read-out.

    Args:
        rng: Source for the fresh random weights
        hidden_size: Hidden units per LSTM direction
        kernel_size: Convolution kernel width
        filters: Number of convolution filters
        attention_dim: Attention projection width
        attention_heads: Heads used for score scaling
    """

    def __init__(
        self,
        rng: np.random.Generator,
        hidden_size: int = 16,
        kernel_size: int = 3,
        filters: int = 8,
        attention_dim: int = 32,
        attention_heads: int = 4,
    ) -> None:
        self.bilstm = BiLstm(1, hidden_size, rng)
        self.conv = Conv1D(kernel_size, filters, self.bilstm.output_size, rng)
        self.attention = SingleQueryAttention(attention_dim, attention_heads, rng)

    def forward(self, normalized: np.ndarray) -> float:
        """Map a normalized sequence to a scalar in normalized units."""
        recurrent = self.bilstm.forward(normalized)
        pooled = max_pool(self.conv.forward(recurrent))
        attended = self.attention.forward(pooled)
        return float(np.mean(attended))
