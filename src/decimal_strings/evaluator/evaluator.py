"""Arithmetic Evaluator: запросы → результаты

Порядок обработки запроса:
1. Проверка длины операндов по ArithmeticLimits → блокировка operand_too_long
2. Dispatch по операции (add/sub/mul) в знаковую арифметику
3. Sentinel "" от арифметики → блокировка invalid_operand
4. Сборка ArithmeticResult

Evaluator stateless: хранит только immutable ArithmeticLimits.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, Optional

from decimal_strings.core.contracts import (
    ArithmeticRequestValidator,
    ArithmeticResultValidator,
)
from decimal_strings.core.domain.literal import ArithmeticLimits
from decimal_strings.core.domain.operation import (
    ArithmeticOperation,
    ArithmeticRequest,
    ArithmeticResult,
    ResultStatus,
)
from decimal_strings.core.math.signed_arithmetic import INVALID_OPERAND, add, mul, sub

logger = logging.getLogger(__name__)

_DISPATCH: Dict[ArithmeticOperation, Callable[[str, str], str]] = {
    ArithmeticOperation.ADD: add,
    ArithmeticOperation.SUB: sub,
    ArithmeticOperation.MUL: mul,
}


@dataclass(frozen=True)
class EvaluationResult:
    """Результат обработки одного запроса."""

    result: ArithmeticResult
    block_reason: str

    # Детали
    details: str

    @property
    def accepted(self) -> bool:
        return self.block_reason == ""


class ArithmeticEvaluator:
    """Evaluator арифметических запросов над десятичными литералами."""

    def __init__(self, limits: Optional[ArithmeticLimits] = None):
        self.limits = limits or ArithmeticLimits()

    def evaluate(self, request: ArithmeticRequest) -> EvaluationResult:
        """Вычисление одного запроса.

        Args:
            request: запрос на вычисление

        Returns:
            EvaluationResult с результатом и причиной блокировки (если есть)
        """
        # 1. Лимит длины (может быть строже грамматического)
        if not (self.limits.admits(request.n1) and self.limits.admits(request.n2)):
            logger.warning(
                "request %s rejected: operand longer than %d chars (len n1=%d, n2=%d)",
                request.request_id,
                self.limits.max_operand_length,
                len(request.n1),
                len(request.n2),
            )
            return self._blocked(
                request,
                "operand_too_long",
                f"operand exceeds max_operand_length={self.limits.max_operand_length}",
            )

        # 2. Dispatch
        value = _DISPATCH[request.operation](request.n1, request.n2)

        # 3. Sentinel
        if value == INVALID_OPERAND:
            logger.warning(
                "request %s rejected: invalid operand for %s",
                request.request_id,
                request.operation.value,
            )
            return self._blocked(
                request, "invalid_operand", "operand is not a valid decimal literal"
            )

        # 4. PASS
        result = ArithmeticResult(
            request_id=request.request_id,
            operation=request.operation,
            status=ResultStatus.OK,
            value=value,
        )
        return EvaluationResult(
            result=result,
            block_reason="",
            details=f"PASS: {request.operation.value}, digits={result.digits}",
        )

    def evaluate_batch(
        self, requests: Iterable[ArithmeticRequest]
    ) -> List[EvaluationResult]:
        """Вычисление пакета запросов с сохранением порядка."""
        results = [self.evaluate(request) for request in requests]

        rejected = sum(1 for r in results if not r.accepted)
        logger.info(
            "batch evaluated: total=%d ok=%d rejected=%d",
            len(results),
            len(results) - rejected,
            rejected,
        )
        return results

    def evaluate_payload(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Вычисление запроса в JSON-форме.

        Args:
            data: dict, соответствующий arithmetic_request.json

        Returns:
            dict, соответствующий arithmetic_result.json

        Raises:
            jsonschema.ValidationError: если data не соответствует схеме запроса
        """
        ArithmeticRequestValidator().validate(data)

        request = ArithmeticRequest(**data)
        payload = self.evaluate(request).result.model_dump(mode="json")

        ArithmeticResultValidator().validate(payload)
        return payload

    @staticmethod
    def _blocked(
        request: ArithmeticRequest, block_reason: str, details: str
    ) -> EvaluationResult:
        result = ArithmeticResult(
            request_id=request.request_id,
            operation=request.operation,
            status=ResultStatus.INVALID_OPERAND,
            value=INVALID_OPERAND,
        )
        return EvaluationResult(result=result, block_reason=block_reason, details=details)
