import logging
from typing import Iterable, Optional

import numpy as np
import pandas as pd

from config.config import CALCULATOR_CONFIG
from core import (
    EvaluationError, UnbalancedParentheses, InfixConverter, RPNEvaluator,
    Tokenizer, sanitize, check_parentheses
)

logger = logging.getLogger(__name__)


class ExpressionEvaluator:
    """过滤 -> 括号检查 -> 切分 -> 转换为RPN -> 求值"""

    def __init__(self, right_associative_power=None, allow_partial=None):
        if right_associative_power is None:
            right_associative_power = CALCULATOR_CONFIG["right_associative_power"]
        if allow_partial is None:
            allow_partial = CALCULATOR_CONFIG["allow_partial"]
        self.right_associative_power = right_associative_power
        self.allow_partial = allow_partial
        self.rpn_evaluator = RPNEvaluator

    def evaluate(self, raw: str) -> float:
        """
        Args:
            raw: 用户输入的原始表达式
        Returns:
            计算结果；除以0等情况返回 inf/nan
        Raises:
            UnbalancedParentheses, StackUnderflow, MalformedExpression
        """
        expression = sanitize(raw)
        if not check_parentheses(expression):
            logger.warning(f"Unbalanced parentheses: {expression!r}")
            raise UnbalancedParentheses(expression)

        # 每次求值都新建转换器，栈不在调用之间共享
        converter = InfixConverter(self.right_associative_power)
        postfix = converter.convert(Tokenizer(expression))
        return self.rpn_evaluator.evaluate(postfix, allow_partial=self.allow_partial)

    def try_evaluate(self, raw: str) -> Optional[float]:
        """求值失败时返回None，供交互界面使用"""
        try:
            return self.evaluate(raw)
        except EvaluationError as e:
            logger.debug(f"Rejected expression {raw!r}: {e.kind}")
            return None

    def evaluate_batch(self, expressions: Iterable[str]) -> pd.DataFrame:
        """
        批量求值，每个表达式一行。
        失败的行 result 为 NaN，error 为错误类型名。
        """
        rows = []
        for raw in expressions:
            raw = str(raw)
            row = {'expression': raw, 'sanitized': sanitize(raw), 'result': np.nan, 'error': ''}
            try:
                row['result'] = self.evaluate(raw)
            except EvaluationError as e:
                logger.warning(f"Error evaluating expression '{raw[:50]}': {e.kind}")
                row['error'] = e.kind
            rows.append(row)

        df = pd.DataFrame(rows, columns=['expression', 'sanitized', 'result', 'error'])
        df['result'] = df['result'].astype(float)
        failed = (df['error'] != '').sum()
        logger.info(f"Evaluated {len(df)} expressions, {failed} rejected")
        return df


def evaluate(raw: str) -> float:
    """使用默认配置对单个表达式求值"""
    return ExpressionEvaluator().evaluate(raw)
