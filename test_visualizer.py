"""Tests for the token stream visualizer."""

import plotly.graph_objects as go
import pytest

from tokens import Number, LEFT_PAREN, RIGHT_PAREN, ADDITION
from visualizer import TokenVisualizer, token_kind, depth_profile


def test_token_kind():
    assert token_kind(Number("1")) == "number"
    assert token_kind(ADDITION) == "operator"
    assert token_kind(LEFT_PAREN) == "bracket"
    with pytest.raises(TypeError):
        token_kind("1")


def test_depth_profile_puts_matching_brackets_level():
    tokens = [LEFT_PAREN, LEFT_PAREN, Number("1"), RIGHT_PAREN, RIGHT_PAREN, ADDITION, Number("2")]
    assert depth_profile(tokens) == [1, 2, 2, 2, 1, 0, 0]


def test_build_figure_groups_tokens_by_kind():
    visualizer = TokenVisualizer("2(3+4)")
    fig = visualizer.build_figure()

    assert isinstance(fig, go.Figure)
    traces = {trace.name: trace for trace in fig.data}
    assert set(traces) == {'Depth', 'Number', 'Operator', 'Bracket', 'Implicit *'}
    assert list(traces['Number'].text) == ['2', '3', '4']
    assert list(traces['Implicit *'].x) == [1]
    assert list(traces['Operator'].text) == ['+']
    assert list(traces['Depth'].y) == [0, 0, 1, 1, 1, 1, 1]
    assert "2(3+4)" in fig.layout.title.text


def test_precomputed_tokens_without_implicit_markers():
    tokens = [Number("1"), ADDITION, Number("2")]
    fig = TokenVisualizer("1+2", tokens=tokens).build_figure()
    assert {trace.name for trace in fig.data} == {'Depth', 'Number', 'Operator'}


def test_generate_html(tmp_path):
    output_file = tmp_path / "tokens.html"
    written = TokenVisualizer("(5)(3)").generate_html(str(output_file))
    assert written == str(output_file)
    assert output_file.exists()
    assert "plotly" in output_file.read_text(encoding="utf-8").lower()
