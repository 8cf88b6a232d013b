"""RPN表达式求值器 - 调用统一的Operators类"""
import logging

from core.errors import StackUnderflow, MalformedExpression
from core.operators import get_operator
from core.token_system import TokenType

logger = logging.getLogger(__name__)


class RPNEvaluator:
    """评估RPN表达式的值"""

    @staticmethod
    def _pop(stack, token):
        if not stack:
            logger.error(f"Insufficient operands for {token.name}")
            raise StackUnderflow(f"insufficient operands for '{token.name}'")
        return stack.pop()

    @staticmethod
    def evaluate(token_sequence, allow_partial=True):
        """
        评估后缀表达式
        Args:
            token_sequence: 后缀顺序的Token序列（逐个消费）
            allow_partial: 是否允许部分表达式（栈中剩余多个元素时返回栈顶）
        Returns:
            float 结果
        """
        stack = []

        for token in token_sequence:
            if token.type == TokenType.OPERAND:
                stack.append(token.value)
                continue

            op_method = get_operator(token.name)
            if token.type != TokenType.OPERATOR or op_method is None:
                raise MalformedExpression(f"unexpected token in RPN sequence: {token.name!r}")

            # ================== 一元操作符处理 ==================
            if token.arity == 1:
                operand = RPNEvaluator._pop(stack, token)
                stack.append(op_method(operand))

            # ================== 二元操作符处理 ==================
            else:
                operand2 = RPNEvaluator._pop(stack, token)
                operand1 = RPNEvaluator._pop(stack, token)
                stack.append(op_method(operand1, operand2))

        # 返回结果处理
        if len(stack) == 0:
            logger.error("Empty stack after evaluation")
            raise StackUnderflow("empty expression")
        elif len(stack) == 1:
            return stack[0]
        elif allow_partial:
            # 多个操作数没有被操作符连接，例如 "1.2.3"；沿用栈顶元素
            logger.debug(f"Partial expression with {len(stack)} stack elements")
            return stack[-1]
        else:
            logger.error(f"Stack has {len(stack)} elements after evaluation, expected 1")
            raise MalformedExpression(f"{len(stack)} operands left on the stack")
