"""core/token_system.py"""
import re
from enum import Enum
import logging

from config.config import CALCULATOR_CONFIG

logger = logging.getLogger(__name__)

ALLOWED_CHARACTERS = frozenset(CALCULATOR_CONFIG["allowed_characters"])

# 数字：整数、带小数点的数、以小数点开头的数（一个数字最多一个小数点）
_TOKEN_PATTERN = re.compile(r'\s*(?:(\d+\.?\d*|\.\d+)|(\S))', re.ASCII)


class TokenType(Enum):
    OPERAND = "operand"    # 数值
    OPERATOR = "operator"  # 操作符
    LPAREN = "lparen"      # (
    RPAREN = "rparen"      # )
    UNKNOWN = "unknown"    # 无法识别的单个字符，例如多余的小数点


class Token:
    __slots__ = ('type', 'name', 'value', 'arity', 'negated')

    def __init__(self, token_type, name, value=None, arity=0, negated=False):
        object.__setattr__(self, 'type', token_type)
        object.__setattr__(self, 'name', name)
        object.__setattr__(self, 'value', value)
        object.__setattr__(self, 'arity', arity)
        object.__setattr__(self, 'negated', negated)  # 仅用于 '('：整组取负

    def __setattr__(self, key, value):
        raise AttributeError("Token is immutable")

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return (self.type, self.name, self.value, self.arity, self.negated) == \
               (other.type, other.name, other.value, other.arity, other.negated)

    def __hash__(self):
        return hash((self.type, self.name, self.value, self.arity, self.negated))

    def __repr__(self):
        return f"Token({self.type.name}, {self.name!r})"

    @property
    def is_number(self):
        return self.type == TokenType.OPERAND

    def negate(self):
        """返回取负后的新数值Token"""
        value = -self.value
        return Token(TokenType.OPERAND, f"-{self.name}", value=value)


def number_token(text):
    return Token(TokenType.OPERAND, text, value=float(text))


# Token定义字典（操作符和括号）
TOKEN_DEFINITIONS = {
    '+': Token(TokenType.OPERATOR, '+', arity=2),
    '-': Token(TokenType.OPERATOR, '-', arity=2),
    '*': Token(TokenType.OPERATOR, '*', arity=2),
    '/': Token(TokenType.OPERATOR, '/', arity=2),
    '^': Token(TokenType.OPERATOR, '^', arity=2),
    # 一元取负，只由转换器在 "-(...)" 之后生成
    'neg': Token(TokenType.OPERATOR, 'neg', arity=1),
    '(': Token(TokenType.LPAREN, '('),
    ')': Token(TokenType.RPAREN, ')'),
}


def sanitize(expression):
    """
    过滤输入，只保留数字、小数点、五个操作符和括号。
    空格同样会被删除，因此 "2 3" 会变成 "23"。
    """
    return ''.join(ch for ch in expression if ch in ALLOWED_CHARACTERS)


def check_parentheses(expression):
    """
    用栈检查括号是否平衡。
    遇到没有对应 '(' 的 ')' 时标记为无效，但继续扫描到结尾；
    扫描结束后栈中仍有 '(' 同样无效。
    """
    result = True
    stack = []
    for ch in expression:
        if ch == '(':
            stack.append(ch)
        elif ch == ')':
            if stack:
                stack.pop()
            else:
                result = False
    if stack:
        result = False
    return result


class Tokenizer:
    """
    把（已过滤的）表达式切分为Token序列。
    每次迭代都从头重新扫描；不做符号或优先级处理，那是转换器的工作。
    """

    def __init__(self, expression):
        self.expression = expression

    def __iter__(self):
        for match in _TOKEN_PATTERN.finditer(self.expression):
            number, symbol = match.groups()
            if number:
                yield number_token(number)
            elif symbol in TOKEN_DEFINITIONS:
                yield TOKEN_DEFINITIONS[symbol]
            elif symbol:
                yield Token(TokenType.UNKNOWN, symbol)

    def tokens(self):
        return list(self)
