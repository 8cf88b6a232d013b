"""中缀表达式 -> 逆波兰表达式（调度场算法）"""
import logging

from core.errors import StackUnderflow, UnbalancedParentheses
from core.operators import op_priority
from core.token_system import TokenType, Token, TOKEN_DEFINITIONS, Tokenizer, sanitize

logger = logging.getLogger(__name__)


class InfixConverter:
    """
    把Token序列转换为后缀顺序。

    一元负号：出现在表达式开头或 '(' 之后的 '-' 不入栈，
    只设置标记；标记作用于下一个数字，或者作用于紧随其后的整个括号组。
    所有操作符默认左结合，包括 '^'（2^3^2 = 64）。
    """

    def __init__(self, right_associative_power=False):
        self.right_associative_power = right_associative_power

    def _should_pop(self, top, token):
        """栈顶操作符是否应在当前操作符入栈前弹出"""
        if top.type != TokenType.OPERATOR:
            return False
        if self.right_associative_power and token.name == '^':
            return op_priority(top.name) > op_priority(token.name)
        return op_priority(top.name) >= op_priority(token.name)

    def convert(self, tokens):
        """
        Args:
            tokens: Tokenizer 产生的原始Token序列
        Returns:
            后缀顺序的Token列表（数字带符号，操作符为裸符号）
        """
        result = []
        operators = []  # 临时保存操作符和括号
        minus_trigger = False
        prev_token = None

        for token in tokens:
            if token.is_number and minus_trigger:
                result.append(token.negate())
                minus_trigger = False
            elif token.is_number:
                result.append(token)
            elif token.name == '-' and (prev_token is None or prev_token.type == TokenType.LPAREN):
                # 数字或括号前的负号
                minus_trigger = True
            elif token.type == TokenType.LPAREN:
                if minus_trigger:
                    token = Token(TokenType.LPAREN, '(', negated=True)
                    minus_trigger = False
                operators.append(token)
            elif token.type == TokenType.RPAREN:
                while operators and operators[-1].type != TokenType.LPAREN:
                    result.append(operators.pop())
                if not operators:
                    logger.warning("Closing parenthesis without matching opening one")
                    raise StackUnderflow("unmatched ')'")
                opening = operators.pop()
                if opening.negated:
                    result.append(TOKEN_DEFINITIONS['neg'])
            elif token.type == TokenType.OPERATOR:
                while operators and self._should_pop(operators[-1], token):
                    result.append(operators.pop())
                operators.append(token)
            else:
                logger.debug(f"Ignoring unknown token: {token.name!r}")
            prev_token = token

        while operators:
            top = operators.pop()
            if top.type == TokenType.LPAREN:
                raise UnbalancedParentheses("unclosed '('")
            result.append(top)

        logger.debug(f"RPN expression: {' '.join(t.name for t in result)}")
        return result


def to_rpn(expression, right_associative_power=False):
    """过滤并切分表达式后转换为后缀序列（不做括号检查）"""
    tokens = Tokenizer(sanitize(expression))
    return InfixConverter(right_associative_power).convert(tokens)
