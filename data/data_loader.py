"""数据加载模块 - 批量表达式的读取和结果保存"""
import pandas as pd
import logging

from config.config import BATCH_CONFIG

logger = logging.getLogger(__name__)


def load_expressions(file_path, column=None):
    """
    加载待计算的表达式。

    Parameters:
    - file_path: CSV文件（读取指定列）或文本文件（每行一个表达式）
    - column: CSV中的表达式列名, 默认为 BATCH_CONFIG['expression_column']

    Returns:
    - expressions: 表达式字符串的 Series（空行已去掉）
    """
    column = column or BATCH_CONFIG['expression_column']
    logger.info(f"Loading expressions from {file_path}")

    if str(file_path).endswith('.csv'):
        df = pd.read_csv(file_path, dtype=str, keep_default_na=False)
        if column not in df.columns:
            raise ValueError(f"Expression column '{column}' not found in {file_path}.")
        expressions = df[column]
    else:
        with open(file_path, 'r', encoding='utf-8') as f:
            expressions = pd.Series([line.rstrip('\n') for line in f], dtype=str)

    expressions = expressions[expressions.str.strip() != ''].reset_index(drop=True)
    expressions.name = column
    logger.info(f"Loaded {len(expressions)} expressions")
    return expressions


def save_results(results, output_path=None):
    """把批量计算结果保存为CSV"""
    output_path = output_path or BATCH_CONFIG['results_path']
    logger.info(f"Saving results to {output_path}")
    results.to_csv(output_path, index=False)
    return output_path
