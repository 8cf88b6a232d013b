"""核心模块 - Token系统、中缀转换器、RPN评估器和操作符"""
from .errors import (
    EvaluationError, UnbalancedParentheses, StackUnderflow, MalformedExpression
)
from .token_system import (
    TokenType, Token, TOKEN_DEFINITIONS, Tokenizer, sanitize, check_parentheses
)
from .operators import Operators, op_priority
from .converter import InfixConverter, to_rpn
from .rpn_evaluator import RPNEvaluator

__all__ = [
    'EvaluationError', 'UnbalancedParentheses', 'StackUnderflow', 'MalformedExpression',
    'TokenType', 'Token', 'TOKEN_DEFINITIONS', 'Tokenizer', 'sanitize', 'check_parentheses',
    'Operators', 'op_priority', 'InfixConverter', 'to_rpn', 'RPNEvaluator'
]
