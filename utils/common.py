import numpy as np
import pandas as pd
import matplotlib.pyplot as plt
from matplotlib.colors import LinearSegmentedColormap

from utils.matrix_engine import color_for, css_rgb

# color_for와 같은 흰색 → 파란색 그라데이션
WHITE_BLUE = LinearSegmentedColormap.from_list("white_blue", [(1.0, 1.0, 1.0), (0.0, 0.0, 1.0)])


def np_to_df(array, row_idx=None, col_idx=None):
    """NumPy 배열을 Pandas DataFrame으로 변환"""
    if row_idx is None:
        row_idx = [f"row_{i}" for i in range(array.shape[0])]
    if col_idx is None:
        col_idx = [f"col_{i}" for i in range(array.shape[1])]

    return pd.DataFrame(array, index=row_idx, columns=col_idx)


def matrix_cell_styles(matrix):
    """셀마다 배경색 CSS 문자열을 담은 배열"""
    styles = np.empty(matrix.shape, dtype=object)
    for i in range(matrix.shape[0]):
        for j in range(matrix.shape[1]):
            styles[i, j] = f"background-color: {css_rgb(color_for(matrix[i, j], matrix))}"
    return styles


def style_matrix(df, precision=2):
    """값 행렬 DataFrame에 색상과 소수점 포맷 적용"""
    styles = matrix_cell_styles(df.to_numpy(dtype=np.float64))
    return (
        df.style
        .apply(lambda _: pd.DataFrame(styles, index=df.index, columns=df.columns), axis=None)
        .format(f"{{:.{precision}f}}")
    )


def plot_heatmap(weights, xticks=None, yticks=None, title="Value Matrix", cmap=WHITE_BLUE, show_values=True):
    """값 행렬 히트맵 플롯"""
    fig, ax = plt.subplots(figsize=(6, 5))
    vmax = float(np.max(weights)) if weights.size else 1.0
    # color_for와 같은 기준: 0 → 흰색, 최댓값 → 파란색
    im = ax.imshow(weights, cmap=cmap, vmin=0, vmax=vmax if vmax > 0 else 1.0)

    if xticks is not None:
        ax.set_xticks(np.arange(len(xticks)))
        ax.set_xticklabels(xticks)

    if yticks is not None:
        ax.set_yticks(np.arange(len(yticks)))
        ax.set_yticklabels(yticks)

    ax.set_title(title)

    # 값 주석
    if show_values:
        for i in range(weights.shape[0]):
            for j in range(weights.shape[1]):
                value = weights[i, j]
                ax.text(j, i, f'{value:.2f}', ha="center", va="center",
                        color='white' if vmax > 0 and value > 0.6 * vmax else 'black', fontsize=10)

    plt.colorbar(im, ax=ax)
    return fig
