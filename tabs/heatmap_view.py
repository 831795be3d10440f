import streamlit as st
import numpy as np
import matplotlib.pyplot as plt
from utils.common import WHITE_BLUE, plot_heatmap
from utils.matrix_engine import ordered_tokens, token_label


def render_heatmap_view(values, order, bias_enabled, matrix):
    """히트맵 탭을 렌더링합니다."""

    st.subheader("🗺️ 값 행렬 히트맵")
    st.markdown("""
    같은 값 행렬을 matplotlib 히트맵으로 그립니다. 기본 컬러맵은 표와 같은 **흰색 → 파란색** 그라데이션입니다.
    """)

    # 시각화 옵션
    col1, col2 = st.columns(2)

    with col1:
        colormap = st.selectbox(
            "컬러맵 선택",
            ["white_blue", "viridis", "plasma", "inferno", "magma", "coolwarm"],
            help="행렬 값을 표현할 컬러맵을 선택하세요",
            key="heatmap_colormap",
        )

    with col2:
        show_values = st.checkbox("값 표시", value=True, help="셀에 값을 표시합니다", key="heatmap_show_values")

    reordered = ordered_tokens(order)
    labels = [token_label(t, values.get(t, 0)) for t in reordered]
    cmap = WHITE_BLUE if colormap == "white_blue" else colormap
    title = "Value Matrix (with Positional Bias)" if bias_enabled else "Value Matrix (Direct Multiplication)"

    fig = plot_heatmap(matrix, xticks=labels, yticks=reordered, title=title, cmap=cmap, show_values=show_values)
    st.pyplot(fig)
    plt.close(fig)

    # 통계
    st.markdown("### 📊 행렬 통계")
    col1, col2, col3 = st.columns(3)
    with col1:
        st.metric("최댓값", f"{np.max(matrix):.2f}")
    with col2:
        st.metric("최솟값", f"{np.min(matrix):.2f}")
    with col3:
        st.metric("대칭 여부", "대칭" if np.allclose(matrix, matrix.T) else "비대칭")
