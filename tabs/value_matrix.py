import streamlit as st
from utils.common import np_to_df, style_matrix
from utils.matrix_engine import ordered_tokens, token_label


def render_value_matrix(values, order, bias_enabled, matrix, bias_scale=0.1):
    """값 행렬 탭을 렌더링합니다."""

    st.subheader("🧮 Value Matrix with Positional Bias")
    st.markdown(f"""
    각 셀은 **두 토큰 값의 곱**입니다. 위치 편향을 켜면 표시 위치 i, j에 따라
    **bias = ({bias_scale}·i) × ({bias_scale}·j)** 가 더해집니다.
    """)

    reordered = ordered_tokens(order)
    labels = [token_label(t, values.get(t, 0)) for t in reordered]

    # 현재 토큰 순서
    st.markdown("### 🔢 현재 토큰 순서")
    cols = st.columns(len(labels))
    for idx, (col, label) in enumerate(zip(cols, labels)):
        with col:
            st.metric(f"위치 {idx}", label)

    # 값 행렬
    suffix = "(with Positional Bias)" if bias_enabled else "(Direct Multiplication)"
    st.markdown(f"### 📋 Value Matrix {suffix}")
    df = np_to_df(matrix, row_idx=reordered, col_idx=labels)
    st.dataframe(style_matrix(df))
    st.caption("색이 진한 파란색일수록 행렬 최댓값에 가깝습니다. 최댓값이 0이면 모든 셀이 흰색입니다.")

    # 관찰
    st.markdown("### 👀 Observation")
    st.info(
        "위치 편향이 없으면 토큰 순서는 행렬의 배치만 바꾸고 값은 바꾸지 않습니다. "
        "위치 편향을 켜면 편향이 현재 순서의 위치로 계산되기 때문에 셔플할 때 배치와 값이 모두 바뀝니다."
    )
