"""utils/formatting.py"""
import math

from config.config import CLI_CONFIG


def format_result(value, precision=None):
    """按C++默认输出流的方式格式化：%g，6位有效数字，inf/-inf/nan"""
    precision = precision or CLI_CONFIG['precision']
    value = float(value)
    if math.isnan(value):
        return "nan"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    return f"{value:.{precision}g}"


def format_line(expression, value):
    return CLI_CONFIG['result_template'].format(expression=expression, result=format_result(value))
