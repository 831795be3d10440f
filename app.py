# -*- coding: utf-8 -*-
import logging

import streamlit as st
import numpy as np
import matplotlib.pyplot as plt

from utils.config import load_config
from utils.matrix_engine import TOKENS, compute_matrix, ordered_tokens, parse_value, shuffle

# 탭 모듈들 import
from tabs.value_matrix import render_value_matrix
from tabs.heatmap_view import render_heatmap_view
from tabs.shuffle_experiment import render_shuffle_experiment
from tabs.pytorch_implementation import render_pytorch_implementation
from tabs.learning_guide import render_learning_guide

# 한글 폰트 설정
import platform

# 운영체제별 한글 폰트 설정
if platform.system() == 'Darwin':  # macOS
    plt.rcParams['font.family'] = 'AppleGothic'
elif platform.system() == 'Windows':
    plt.rcParams['font.family'] = 'Malgun Gothic'
else:  # Linux
    plt.rcParams['font.family'] = 'DejaVu Sans'

# 마이너스 기호 깨짐 방지
plt.rcParams['axes.unicode_minus'] = False

st.set_page_config(page_title="Attention Visualizer", layout="wide")

config = load_config()
logging.basicConfig(level=getattr(logging, config.log_level, logging.INFO),
                    format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger("attention_visualizer")

# -----------------------------
# 세션 상태 (순서 / 난수 생성기)
# -----------------------------
if "order" not in st.session_state:
    st.session_state.order = list(range(len(TOKENS)))
if "rng" not in st.session_state:
    st.session_state.rng = np.random.default_rng(config.shuffle_seed)

# -----------------------------
# Sidebar (입력/옵션/버튼)
# -----------------------------
st.sidebar.header("입력 & 옵션")
values = {}
for token in TOKENS:
    raw = st.sidebar.text_input(f"Token {token} Value", str(config.default_value(token)), key=f"value_{token}")
    values[token] = parse_value(raw)

bias_enabled = st.sidebar.checkbox(
    f"Enable Positional Bias (bias = {config.bias_scale}i × {config.bias_scale}j)",
    value=False,
    key="bias_enabled",
)

col1, col2 = st.sidebar.columns(2)
with col1:
    if st.button("🔀 Shuffle Order", key="shuffle_button"):
        st.session_state.order = shuffle(st.session_state.order, st.session_state.rng)
        logger.info("순서 셔플: %s", ordered_tokens(st.session_state.order))
with col2:
    if st.button("↩️ 순서 초기화", key="reset_order_button"):
        st.session_state.order = list(range(len(TOKENS)))

order = list(st.session_state.order)

# 입력이 바뀔 때마다 처음부터 다시 계산
matrix = compute_matrix(values, order, bias_enabled, scale=config.bias_scale)
logger.debug("values=%s order=%s bias=%s matrix=%s", values, order, bias_enabled, matrix.tolist())

st.title("🎯 Attention Visualizer")
st.caption("토큰 값 · 위치 편향 · 셔플로 보는 3×3 값 행렬")

tabs = st.tabs(["🧮 값 행렬", "🗺️ 히트맵", "🔀 셔플 실험", "PyTorch 구현", "🧭 학습 가이드"])

with tabs[0]:
    render_value_matrix(values, order, bias_enabled, matrix, bias_scale=config.bias_scale)

with tabs[1]:
    render_heatmap_view(values, order, bias_enabled, matrix)

with tabs[2]:
    render_shuffle_experiment(values, order, bias_enabled, bias_scale=config.bias_scale,
                              rng=st.session_state.rng)

with tabs[3]:
    render_pytorch_implementation(values, order, bias_enabled, matrix, bias_scale=config.bias_scale)

with tabs[4]:
    render_learning_guide(bias_scale=config.bias_scale)
