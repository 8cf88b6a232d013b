"""表达式求值过程中的异常类型"""


class EvaluationError(Exception):
    """所有求值错误的基类；调用方只需要知道错误类型 kind"""
    kind = "EvaluationError"


class UnbalancedParentheses(EvaluationError):
    """括号不匹配：由括号检查器在解析之前发现"""
    kind = "UnbalancedParentheses"


class StackUnderflow(EvaluationError):
    """栈下溢：转换器遇到多余的 ')'，或求值器的操作数不足"""
    kind = "StackUnderflow"


class MalformedExpression(EvaluationError):
    """严格模式下求值结束时栈中残留多个操作数"""
    kind = "MalformedExpression"
