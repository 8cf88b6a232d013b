"""core/operators.py"""
import numpy as np
import logging

from config.config import OPERATOR_PRIORITY

logger = logging.getLogger(__name__)


def op_priority(symbol):
    """操作符优先级；未知符号为0（最低）"""
    return OPERATOR_PRIORITY.get(symbol, 0)


class Operators:
    """所有操作符的静态方法集合，按 IEEE-754 双精度语义计算"""

    # 二元操作符========================================
    @staticmethod
    def add(operand1, operand2):
        """加法操作符"""
        with np.errstate(over='ignore', invalid='ignore'):
            return float(np.float64(operand1) + np.float64(operand2))

    @staticmethod
    def sub(operand1, operand2):
        """减法操作符"""
        with np.errstate(over='ignore', invalid='ignore'):
            return float(np.float64(operand1) - np.float64(operand2))

    @staticmethod
    def mul(operand1, operand2):
        """乘法操作符"""
        with np.errstate(over='ignore', invalid='ignore'):
            return float(np.float64(operand1) * np.float64(operand2))

    @staticmethod
    def div(operand1, operand2):
        """除法：除以0得到 inf/-inf，0/0 得到 nan，不抛异常"""
        with np.errstate(divide='ignore', over='ignore', invalid='ignore'):
            return float(np.true_divide(np.float64(operand1), np.float64(operand2)))

    @staticmethod
    def pow(operand1, operand2):
        """乘方：负数的分数次幂得到 nan，溢出得到 inf"""
        with np.errstate(divide='ignore', over='ignore', invalid='ignore'):
            return float(np.power(np.float64(operand1), np.float64(operand2)))

    # 一元操作符====================
    @staticmethod
    def neg(operand):
        """取负"""
        return float(np.negative(np.float64(operand)))


# 符号 -> Operators 方法名
SYMBOL_TO_METHOD = {
    '+': 'add',
    '-': 'sub',
    '*': 'mul',
    '/': 'div',
    '^': 'pow',
    'neg': 'neg',
}


def get_operator(symbol):
    """根据符号返回对应的计算函数，未知符号返回None"""
    name = SYMBOL_TO_METHOD.get(symbol)
    if name is None:
        logger.error(f"Unknown operator: {symbol}")
        return None
    return getattr(Operators, name)
