"""Untrained network layers built on numpy.

Every layer draws its weights once, at construction, from the generator it is
given. Nothing here is ever fit to data; a layer is a fixed random transform
that lives for a single prediction.
"""

import numpy as np

WEIGHT_SCALE = 0.1  # weights ~ U[-0.05, 0.05)
GATE_BIAS = 0.1


def init_weights(rng: np.random.Generator, rows: int, cols: int) -> np.ndarray:
    """Uniform weights centred on zero with total width WEIGHT_SCALE."""
    return (rng.random((rows, cols)) - 0.5) * WEIGHT_SCALE


def sigmoid(x: np.ndarray) -> np.ndarray:
    return 1.0 / (1.0 + np.exp(-x))


def relu(x: np.ndarray) -> np.ndarray:
    return np.maximum(0.0, x)


def softmax(x: np.ndarray) -> np.ndarray:
    """Numerically stable softmax over a 1-D vector."""
    exps = np.exp(x - np.max(x))
    return exps / np.sum(exps)


class LstmCell:
    """Gated recurrent cell (forget, input, candidate, output)."""

    def __init__(self, input_size: int, hidden_size: int, rng: np.random.Generator) -> None:
        self.input_size = input_size
        self.hidden_size = hidden_size
        concat = input_size + hidden_size
        self.w_forget = init_weights(rng, hidden_size, concat)
        self.w_input = init_weights(rng, hidden_size, concat)
        self.w_cell = init_weights(rng, hidden_size, concat)
        self.w_output = init_weights(rng, hidden_size, concat)
        self.b_forget = np.full(hidden_size, GATE_BIAS)
        self.b_input = np.full(hidden_size, GATE_BIAS)
        self.b_cell = np.full(hidden_size, GATE_BIAS)
        self.b_output = np.full(hidden_size, GATE_BIAS)

    def initial_state(self) -> tuple[np.ndarray, np.ndarray]:
        return np.zeros(self.hidden_size), np.zeros(self.hidden_size)

    def step(
        self,
        x: np.ndarray,
        hidden: np.ndarray,
        cell: np.ndarray,
    ) -> tuple[np.ndarray, np.ndarray]:
        """Advance one time step.

        Args:
            x: Input vector of length input_size
            hidden: Previous hidden state
            cell: Previous cell state

        Returns:
            Tuple of (hidden, cell) after the step
        """
        concat = np.concatenate([x, hidden])
        forget = sigmoid(self.w_forget @ concat + self.b_forget)
        inp = sigmoid(self.w_input @ concat + self.b_input)
        candidate = np.tanh(self.w_cell @ concat + self.b_cell)
        cell = forget * cell + inp * candidate
        out = sigmoid(self.w_output @ concat + self.b_output)
        return out * np.tanh(cell), cell

    def run(self, sequence: np.ndarray) -> np.ndarray:
        """Hidden state after each element of ``sequence`` (shape T x input_size)."""
        hidden, cell = self.initial_state()
        states = np.zeros((len(sequence), self.hidden_size))
        for t, x in enumerate(sequence):
            hidden, cell = self.step(np.atleast_1d(x), hidden, cell)
            states[t] = hidden
        return states


class BiLstm:
    """Independent forward and backward LSTM passes, concatenated per position."""

    def __init__(self, input_size: int, hidden_size: int, rng: np.random.Generator) -> None:
        self.forward_cell = LstmCell(input_size, hidden_size, rng)
        self.backward_cell = LstmCell(input_size, hidden_size, rng)

    @property
    def output_size(self) -> int:
        return self.forward_cell.hidden_size * 2

    def forward(self, sequence: np.ndarray) -> np.ndarray:
        """Return a (T, 2 * hidden) array of [forward, backward] states."""
        sequence = np.asarray(sequence, dtype=float).reshape(
            len(sequence), self.forward_cell.input_size
        )
        forward_states = self.forward_cell.run(sequence)
        backward_states = self.backward_cell.run(sequence[::-1])[::-1]
        return np.concatenate([forward_states, backward_states], axis=1)


class Conv1D:
    """Valid 1-D convolution across time with ReLU, one kernel per filter."""

    def __init__(
        self,
        kernel_size: int,
        filters: int,
        channels: int,
        rng: np.random.Generator,
    ) -> None:
        self.kernel_size = kernel_size
        self.filters = filters
        self.channels = channels
        self.kernels = init_weights(rng, filters, kernel_size * channels).reshape(
            filters, kernel_size, channels
        )

    def forward(self, sequence: np.ndarray) -> np.ndarray:
        """Return a (filters, T - kernel_size + 1) activation map."""
        sequence = np.asarray(sequence, dtype=float).reshape(len(sequence), self.channels)
        steps = len(sequence) - self.kernel_size + 1
        if steps <= 0:
            return np.zeros((self.filters, 0))

        out = np.zeros((self.filters, steps))
        for i in range(steps):
            patch = sequence[i : i + self.kernel_size]
            out[:, i] = np.tensordot(self.kernels, patch, axes=([1, 2], [0, 1]))
        return relu(out)


def max_pool(feature_map: np.ndarray) -> np.ndarray:
    """Max over the time axis for each filter. Empty maps pool to zeros."""
    if feature_map.shape[1] == 0:
        return np.zeros(feature_map.shape[0])
    return feature_map.max(axis=1)


class SingleQueryAttention:
    """Scaled dot-product attention over the elements of one pooled vector.

    The input is padded or truncated to ``dim``. Each element is scored by
    q_i * k_i / sqrt(head_dim), the scores are softmaxed, used to weight
    the values, and the result goes through an output projection.
    """

    def __init__(self, dim: int, heads: int, rng: np.random.Generator) -> None:
        if heads <= 0 or dim < heads:
            raise ValueError(f"Attention needs 0 < heads <= dim, got dim={dim}, heads={heads}")
        self.dim = dim
        self.heads = heads
        self.head_dim = dim // heads
        self.w_query = init_weights(rng, dim, dim)
        self.w_key = init_weights(rng, dim, dim)
        self.w_value = init_weights(rng, dim, dim)
        self.w_out = init_weights(rng, dim, dim)

    def forward(self, vector: np.ndarray) -> np.ndarray:
        x = np.zeros(self.dim)
        vector = np.asarray(vector, dtype=float)[: self.dim]
        x[: len(vector)] = vector

        query = self.w_query @ x
        key = self.w_key @ x
        value = self.w_value @ x
        weights = softmax(query * key / np.sqrt(self.head_dim))
        return self.w_out @ (weights * value)


class Dense:
    """Linear read-out layer."""

    def __init__(self, input_size: int, output_size: int, rng: np.random.Generator) -> None:
        self.weights = init_weights(rng, output_size, input_size)

    def forward(self, x: np.ndarray) -> np.ndarray:
        return self.weights @ np.asarray(x, dtype=float)
