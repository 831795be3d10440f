import matplotlib
matplotlib.use("Agg")

import matplotlib.pyplot as plt
import numpy as np
from utils.common import matrix_cell_styles, np_to_df, plot_heatmap, style_matrix
from utils.matrix_engine import DEFAULT_VALUES, compute_matrix


def test_np_to_df_labels():
    df = np_to_df(np.eye(2), row_idx=["A", "B"], col_idx=["A(1)", "B(2)"])
    assert list(df.index) == ["A", "B"]
    assert list(df.columns) == ["A(1)", "B(2)"]
    df = np_to_df(np.eye(2))
    assert list(df.columns) == ["col_0", "col_1"]


def test_cell_styles_follow_color_mapping():
    m = compute_matrix(DEFAULT_VALUES, [0, 1, 2], False)
    styles = matrix_cell_styles(m)
    assert styles[2, 2] == "background-color: rgb(0, 0, 255)"
    assert styles[0, 2] == "background-color: rgb(170, 170, 255)"


def test_style_matrix_renders_two_decimals():
    m = compute_matrix(DEFAULT_VALUES, [0, 1, 2], True)
    html = style_matrix(np_to_df(m, row_idx=list("ABC"), col_idx=list("ABC"))).to_html()
    assert "6.02" in html
    assert "rgb(0, 0, 255)" in html


def test_plot_heatmap_annotations():
    m = compute_matrix(DEFAULT_VALUES, [2, 0, 1], False)
    fig = plot_heatmap(m, xticks=["C", "A", "B"], yticks=["C", "A", "B"])
    texts = [t.get_text() for t in fig.axes[0].texts]
    assert len(texts) == 9
    assert "9.00" in texts
    plt.close(fig)


def test_plot_heatmap_all_zero():
    fig = plot_heatmap(np.zeros((3, 3)), show_values=False)
    assert fig.axes[0].texts == []
    plt.close(fig)
