import logging
import math
import re
import sys

import numpy as np

logger = logging.getLogger(__name__)

TOKENS = ["A", "B", "C"]
DEFAULT_VALUES = {"A": 1, "B": 2, "C": 3}
BIAS_SCALE = 0.1

# 선행 공백 + 부호 + ASCII 숫자까지만 읽고 나머지는 무시 ("3.7" -> 3, "5abc" -> 5)
_INT_PREFIX = re.compile(r"\s*([+-]?)0*([0-9]+)")

# float64로 표현 가능한 정수 범위
_FLOAT_MAX = int(sys.float_info.max)
_MAX_DIGITS = len(str(_FLOAT_MAX))


def _fits_float(n):
    return -_FLOAT_MAX <= n <= _FLOAT_MAX


def parse_value(raw):
    """사용자 입력을 정수로 해석. 해석할 수 없으면 0"""
    if isinstance(raw, (int, np.integer)) and not isinstance(raw, bool):
        value = int(raw)
    else:
        match = _INT_PREFIX.match(raw) if isinstance(raw, str) else None
        if match is None:
            logger.debug("정수로 해석할 수 없는 입력 %r -> 0", raw)
            return 0
        sign, digits = match.groups()
        # int() 문자열 길이 제한보다 먼저 자릿수로 거른다
        if len(digits) > _MAX_DIGITS:
            logger.debug("자릿수가 너무 많은 입력 (%d자리) -> 0", len(digits))
            return 0
        value = int(sign + digits)
    if not _fits_float(value):
        logger.debug("float64 범위를 벗어난 값 -> 0")
        return 0
    return value


def ordered_tokens(order, tokens=TOKENS):
    """표시 순서대로 토큰 나열. 범위를 벗어난 인덱스는 None"""
    return [tokens[i] if 0 <= i < len(tokens) else None for i in order]


def token_label(token, value):
    return f"{token}({value})"


def positional_bias(i, j, enabled, scale=BIAS_SCALE):
    """표시 위치 i, j에만 의존하는 위치 편향 (scale*i)*(scale*j)"""
    if not enabled:
        return 0.0
    return (scale * i) * (scale * j)


def _token_value(values, token):
    value = values.get(token, 0) if token is not None else 0
    if not _fits_float(value):
        logger.debug("토큰 %s 값이 float64 범위를 벗어남 -> 0", token)
        return 0
    return value


def compute_matrix(values, order, bias_enabled, scale=BIAS_SCALE, tokens=TOKENS):
    """
    값 행렬 계산: M[i, j] = v(order[i]) * v(order[j]) + bias(i, j)

    values: 토큰 -> 정수 (없는 토큰, float64 범위를 벗어난 값은 0)
    order: 토큰 인덱스의 순열 (표시 순서)
    bias_enabled: 위치 편향 사용 여부
    """
    v = np.array(
        [_token_value(values, t) for t in ordered_tokens(order, tokens)],
        dtype=np.float64,
    )
    matrix = np.outer(v, v)
    if bias_enabled:
        pos = scale * np.arange(len(v), dtype=np.float64)
        matrix = matrix + np.outer(pos, pos)
    return matrix


def color_for(value, matrix):
    """
    셀 값을 흰색→파란색 그라데이션으로 변환합니다.

    행렬 최댓값으로 정규화한 뒤 intensity = floor(255 * (1 - normalized)),
    [0, 255]로 자르고 (intensity, intensity, 255)를 반환합니다.
    최댓값이 0이거나 정규화 결과가 유한하지 않으면 normalized = 0으로 취급합니다.
    """
    matrix = np.asarray(matrix, dtype=np.float64)
    normalized = 0.0
    if matrix.size > 0:
        max_value = float(np.max(matrix))
        if max_value != 0:
            normalized = float(value) / max_value
        if not math.isfinite(normalized):
            normalized = 0.0
    intensity = math.floor(255 * (1 - normalized))
    intensity = int(min(max(intensity, 0), 255))
    return (intensity, intensity, 255)


def css_rgb(color):
    r, g, b = color
    return f"rgb({r}, {g}, {b})"


def shuffle(order, rng=None):
    """Fisher–Yates 셔플. 입력은 건드리지 않고 새 리스트를 반환"""
    if rng is None:
        rng = np.random.default_rng()
    new_order = list(order)
    for i in range(len(new_order) - 1, 0, -1):
        j = int(rng.integers(0, i + 1))
        new_order[i], new_order[j] = new_order[j], new_order[i]
    return new_order
