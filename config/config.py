"""配置文件"""
import logging

logger = logging.getLogger(__name__)

# 计算器参数
CALCULATOR_CONFIG = {
    "allowed_characters": "0123456789.+-*/^()",
    "right_associative_power": False,  # False: 2^3^2 = (2^3)^2 = 64
    "allow_partial": True,  # 栈中残留多个操作数时返回栈顶，而不是报错
}

# 操作符优先级（未列出的符号为0）
OPERATOR_PRIORITY = {
    '+': 1,
    '-': 1,
    '*': 2,
    '/': 2,
    '^': 3,
}

# 命令行交互
CLI_CONFIG = {
    "prompt": "Enter formula to calculate: ",
    "error_message": "Wrong expression!!!",
    "result_template": "Result: {expression} = {result}",
    "precision": 6,  # 有效数字位数，与C++默认输出流一致
    "exit_commands": ("exit", "quit"),
}

# 批量计算
BATCH_CONFIG = {
    "expression_column": "expression",
    "results_path": "calc_results.csv",
}

LOGGING_CONFIG = {
    "level": "WARNING",
    "format": '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
}


# 验证配置
def validate_config():
    """验证配置的合理性"""
    assert set(OPERATOR_PRIORITY) == set("+-*/^"), "只支持五个二元操作符"
    assert OPERATOR_PRIORITY['+'] == OPERATOR_PRIORITY['-'], "+ 和 - 优先级相同"
    assert OPERATOR_PRIORITY['*'] == OPERATOR_PRIORITY['/'], "* 和 / 优先级相同"
    assert OPERATOR_PRIORITY['+'] < OPERATOR_PRIORITY['*'] < OPERATOR_PRIORITY['^'], "优先级顺序: +- < */ < ^"
    assert min(OPERATOR_PRIORITY.values()) > 0, "0 保留给未知符号"
    assert set(CALCULATOR_CONFIG["allowed_characters"]) == set("0123456789.+-*/^()")
    assert CLI_CONFIG["precision"] > 0
    logger.info("Configuration validated successfully!")
