import math
from collections import Counter
from itertools import permutations

import streamlit as st
import numpy as np
import matplotlib.pyplot as plt
from utils.matrix_engine import TOKENS, compute_matrix, ordered_tokens, shuffle


def value_multiset(matrix, decimals=9):
    """행렬 값의 다중집합 (정렬된 1차원 배열)"""
    return np.sort(np.round(np.asarray(matrix, dtype=np.float64).ravel(), decimals))


def same_multiset(a, b):
    return np.array_equal(value_multiset(a), value_multiset(b))


def count_permutations(n_trials, rng=None, n=len(TOKENS)):
    """항등 순서를 n_trials번 셔플해서 나온 순열별 횟수"""
    counts = Counter({p: 0 for p in permutations(range(n))})
    for _ in range(n_trials):
        counts[tuple(shuffle(range(n), rng))] += 1
    return counts


def chi_square(counts, n_trials):
    """균등분포 가정 하의 카이제곱 통계량"""
    expected = n_trials / len(counts)
    return sum((c - expected) ** 2 / expected for c in counts.values())


def render_shuffle_experiment(values, order, bias_enabled, bias_scale=0.1, rng=None):
    """셔플 실험 탭을 렌더링합니다."""

    st.subheader("🔀 셔플 실험")
    st.markdown("""
    셔플이 행렬에 어떤 영향을 주는지 확인합니다.
    - 위치 편향이 **없으면** 셔플은 행/열 라벨만 바꾸고 값의 다중집합은 그대로입니다.
    - 위치 편향이 **있으면** 편향이 위치에 따라 달라지므로 값 자체가 바뀝니다 (항등 순서 제외).
    """)

    identity = list(range(len(TOKENS)))

    # 1. 다중집합 비교
    st.markdown("### 1️⃣ 항등 순서 vs 현재 순서")
    st.write("현재 순서:", ordered_tokens(order))

    col1, col2 = st.columns(2)
    for col, bias in zip((col1, col2), (False, True)):
        base = compute_matrix(values, identity, bias, scale=bias_scale)
        current = compute_matrix(values, order, bias, scale=bias_scale)
        with col:
            st.markdown(f"**위치 편향 {'ON' if bias else 'OFF'}**")
            if same_multiset(base, current):
                st.success("값의 다중집합이 같습니다 (배치만 다름)")
            else:
                st.warning("값의 다중집합이 다릅니다 (값이 바뀜)")
            st.write("정렬된 값:", np.round(value_multiset(current), 2).tolist())

    if bias_enabled:
        st.caption("현재 위치 편향이 켜져 있습니다. 값 행렬 탭의 값은 오른쪽 열과 같습니다.")

    # 2. 균등성 검사
    st.markdown("### 2️⃣ 셔플 균등성 (Monte Carlo)")
    n_trials = st.slider("셔플 횟수", min_value=600, max_value=30000, value=6000, step=600,
                         key="shuffle_trials")

    if st.button("실험 실행", key="shuffle_experiment_run"):
        counts = count_permutations(n_trials, rng)
        labels = ["".join(ordered_tokens(p)) for p in counts]
        expected = n_trials / len(counts)

        fig, ax = plt.subplots(figsize=(8, 4))
        ax.bar(labels, list(counts.values()), color='skyblue', edgecolor='black')
        ax.axhline(expected, color='red', linestyle='--', label=f"기댓값 {expected:.0f}")
        ax.set_title(f"{math.factorial(len(TOKENS))}가지 순열의 출현 횟수")
        ax.set_ylabel("횟수")
        ax.legend()
        ax.grid(True, alpha=0.3)
        st.pyplot(fig)
        plt.close(fig)

        stat = chi_square(counts, n_trials)
        # 자유도 5, 유의수준 0.05 임계값
        st.metric("카이제곱 통계량", f"{stat:.2f}", help="자유도 5에서 11.07 미만이면 균등분포와 구별되지 않습니다")
        if stat < 11.07:
            st.success("균등분포와 잘 맞습니다.")
        else:
            st.warning("이번 실행에서는 균등분포와 차이가 큽니다. 다시 실행해 보세요.")
