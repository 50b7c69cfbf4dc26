import pandas as pd

from calculator import ExpressionEvaluator
from data.data_loader import load_expressions, apply_expressions_and_return_results, save_results


def test_load_expressions(tmp_path):
    path = tmp_path / "expressions.txt"
    path.write_text("1+1\n\n  2*3  \n   \n", encoding='utf-8')
    expressions = load_expressions(str(path))
    assert list(expressions) == ["1+1", "2*3"]


def test_apply_and_save(tmp_path):
    results = apply_expressions_and_return_results(["2+3*4", "sqrt(-1)"], ExpressionEvaluator())
    assert results.loc[0, 'result'] == 14.0
    assert results.loc[1, 'error'] == "Invalid token: 'sqrt of negative number'"

    output = tmp_path / "results.csv"
    save_results(results, str(output))
    saved = pd.read_csv(output)
    assert list(saved.columns) == ['expression', 'result', 'error']
    assert saved.loc[0, 'result'] == 14.0
    assert pd.isna(saved.loc[1, 'result'])
