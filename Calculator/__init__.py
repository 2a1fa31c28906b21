"""Integer arithmetic calculator: tokenizer, tree builder and evaluator."""

from .MathEngine import calculate, evaluate

__all__ = ["calculate", "evaluate"]
