import pandas as pd
import pytest

from data.data_loader import load_expressions, save_results


def test_load_expressions_from_text(tmp_path):
    path = tmp_path / "exprs.txt"
    path.write_text("1+2\n\n(3*4)\n   \n", encoding="utf-8")
    expressions = load_expressions(str(path))
    assert list(expressions) == ["1+2", "(3*4)"]


def test_load_expressions_from_csv(tmp_path):
    path = tmp_path / "exprs.csv"
    pd.DataFrame({"id": [1, 2], "formula": ["2^3", "-1"]}).to_csv(path, index=False)
    expressions = load_expressions(str(path), column="formula")
    assert list(expressions) == ["2^3", "-1"]


def test_load_expressions_missing_column(tmp_path):
    path = tmp_path / "exprs.csv"
    pd.DataFrame({"formula": ["1"]}).to_csv(path, index=False)
    with pytest.raises(ValueError):
        load_expressions(str(path))


def test_save_results(tmp_path):
    path = tmp_path / "out.csv"
    df = pd.DataFrame({"expression": ["1+1"], "result": [2.0]})
    assert save_results(df, str(path)) == str(path)
    assert pd.read_csv(path).loc[0, "result"] == 2.0
