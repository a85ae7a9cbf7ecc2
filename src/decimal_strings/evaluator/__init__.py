"""
Evaluator: обработка арифметических запросов
"""

from decimal_strings.evaluator.evaluator import ArithmeticEvaluator, EvaluationResult

__all__ = [
    "ArithmeticEvaluator",
    "EvaluationResult",
]
