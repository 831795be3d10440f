import streamlit as st


def render_learning_guide(bias_scale=0.1):
    """학습 가이드 탭 렌더링"""
    st.subheader("🎯 값 행렬 학습 가이드")
    st.markdown("""
    이 데모는 어텐션 스코어 행렬을 아주 단순하게 흉내 냅니다. 세 토큰 A, B, C에 정수 값을 주고,
    두 토큰 값의 곱으로 3×3 행렬을 만듭니다. 실제 어텐션의 softmax나 학습된 가중치는 없습니다.
    """)

    with st.expander("1단계: 직접 곱셈 (Direct Multiplication)", expanded=True):
        st.latex(r"M_{ij} = v_{\pi(i)} \cdot v_{\pi(j)}")
        st.markdown("""
        - **π**: 현재 토큰 순서 (셔플로 바뀜)
        - 행렬은 항상 대칭입니다.
        - 예시: A=1, B=2, C=3, 순서 [A, B, C] → `[[1, 2, 3], [2, 4, 6], [3, 6, 9]]`
        """)

    with st.expander("2단계: 위치 편향 (Positional Bias)"):
        st.latex(rf"M_{{ij}} = v_{{\pi(i)}} \cdot v_{{\pi(j)}} + ({bias_scale}\,i)({bias_scale}\,j)")
        st.markdown("""
        - 편향은 토큰의 **정체가 아니라 표시 위치** i, j에만 의존합니다.
        - 예시: 위 값에서 M[1][2] = 2·3 + 0.1·1·0.1·2 = **6.02**
        """)

    with st.expander("3단계: 셔플해 보기"):
        st.markdown("""
        - 편향 OFF: 셔플해도 행렬 값의 모음은 같고 행/열 배치만 바뀝니다.
        - 편향 ON: 같은 토큰 쌍이라도 위치가 바뀌면 편향이 달라져 값이 바뀝니다.
        - 실제 트랜스포머가 위치 정보(위치 인코딩)를 따로 넣어 주는 이유가 여기 있습니다.
          위치 정보가 없으면 순서를 바꿔도 모델이 보는 값은 같습니다.
        """)

    with st.expander("색상 읽는 법"):
        st.markdown("""
        - 각 셀 값을 행렬의 최댓값으로 나눈 뒤 `intensity = floor(255 × (1 − 값/최댓값))`
        - 색상은 `rgb(intensity, intensity, 255)`: 최댓값은 진한 파랑, 0은 흰색
        - 최댓값이 0이면 나눌 수 없으므로 모든 셀을 흰색으로 표시합니다.
        """)
