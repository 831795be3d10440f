import streamlit as st
import torch
import numpy as np
from utils.common import np_to_df
from utils.matrix_engine import ordered_tokens


def token_tensor(values, order, requires_grad=False):
    """표시 순서대로 토큰 값을 담은 1차원 텐서"""
    data = [float(values.get(t, 0)) if t is not None else 0.0 for t in ordered_tokens(order)]
    return torch.tensor(data, dtype=torch.float64, requires_grad=requires_grad)


def torch_value_matrix(v, bias_enabled, scale=0.1):
    """torch.outer로 값 행렬 계산"""
    matrix = torch.outer(v, v)
    if bias_enabled:
        pos = scale * torch.arange(v.size(0), dtype=v.dtype)
        matrix = matrix + torch.outer(pos, pos)
    return matrix


def value_gradient(values, order, bias_enabled, scale=0.1):
    """sum(M)의 토큰 값에 대한 그래디언트"""
    v = token_tensor(values, order, requires_grad=True)
    torch_value_matrix(v, bias_enabled, scale).sum().backward()
    return v.grad.detach().numpy()


def render_pytorch_implementation(values, order, bias_enabled, matrix, bias_scale=0.1):
    """PyTorch 구현 탭을 렌더링합니다."""

    st.subheader("PyTorch로 값 행렬 계산")
    st.markdown("NumPy 엔진과 같은 계산을 `torch.outer`로 다시 해서 결과를 비교합니다.")

    reordered = ordered_tokens(order)
    v = token_tensor(values, order)
    matrix_torch = torch_value_matrix(v, bias_enabled, bias_scale)

    st.write("PyTorch 결과 shape:", tuple(matrix_torch.shape))
    st.dataframe(np_to_df(matrix_torch.numpy(), row_idx=reordered, col_idx=reordered))

    if np.allclose(matrix_torch.numpy(), matrix):
        st.success("✅ NumPy 결과와 일치합니다.")
    else:
        st.error("❌ NumPy 결과와 다릅니다.")

    # 그래디언트 계산
    st.markdown("### 🔧 PyTorch 고급 기능")
    if st.checkbox("그래디언트 계산 활성화", key="torch_grad"):
        grad = value_gradient(values, order, bias_enabled, bias_scale)
        st.latex(r"\frac{\partial}{\partial v_k}\sum_{i,j} M_{ij} = 2\sum_i v_i")
        st.write("**그래디언트 정보:**")
        for token, g in zip(reordered, grad):
            st.write(f"- ∂ΣM/∂{token}: {g:.2f}")
        st.caption("위치 편향은 토큰 값과 무관하므로 그래디언트에 영향을 주지 않습니다.")
