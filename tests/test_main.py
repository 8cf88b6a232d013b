import pandas as pd

import main
from calculator import ExpressionEvaluator
from config.config import validate_config


def test_answer():
    evaluator = ExpressionEvaluator()
    assert main.answer(evaluator, "2 + 3 * 4") == "Result: 2+3*4 = 14"
    assert main.answer(evaluator, "(()") == "Wrong expression!!!"


def test_run_interactive_until_exit():
    lines = iter(["1+1", ")(", "exit", "2+2"])
    output = []
    main.run_interactive(ExpressionEvaluator(), input_func=lambda prompt: next(lines), output_func=output.append)
    assert output == ["Result: 1+1 = 2", "Wrong expression!!!"]


def test_run_interactive_stops_on_eof():
    def read(prompt):
        raise EOFError

    output = []
    main.run_interactive(ExpressionEvaluator(), input_func=read, output_func=output.append)
    assert output == []


def test_main_single_expression(capsys):
    main.main(main.build_parser().parse_args(["--expression", "2^3^2"]))
    assert capsys.readouterr().out.strip() == "Result: 2^3^2 = 64"


def test_main_right_associative(capsys):
    main.main(main.build_parser().parse_args(["--expression", "2^3^2", "--right_associative_power"]))
    assert capsys.readouterr().out.strip() == "Result: 2^3^2 = 512"


def test_main_batch(tmp_path, capsys):
    source = tmp_path / "exprs.txt"
    source.write_text("1+2\n+3\n", encoding="utf-8")
    results_path = tmp_path / "results.csv"
    main.main(main.build_parser().parse_args([
        "--input_file", str(source), "--save_results", "--results_path", str(results_path)
    ]))
    out = capsys.readouterr().out.splitlines()
    assert out == ["Result: 1+2 = 3", "+3: Wrong expression!!!"]
    saved = pd.read_csv(results_path, keep_default_na=False)
    assert list(saved['error']) == ["", "StackUnderflow"]


def test_validate_config():
    validate_config()
