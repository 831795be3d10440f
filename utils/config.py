import logging
import os
import re
from dataclasses import dataclass
from typing import Optional, Tuple

from dotenv import load_dotenv

from utils.matrix_engine import BIAS_SCALE, DEFAULT_VALUES, TOKENS, parse_value

logger = logging.getLogger(__name__)

_SEED = re.compile(r"\+?[0-9]{1,64}")


@dataclass(frozen=True)
class AppConfig:
    # (토큰, 값) 쌍. frozen 인스턴스가 해시 가능하도록 튜플로 둔다
    default_values: Tuple[Tuple[str, int], ...] = tuple(DEFAULT_VALUES.items())
    bias_scale: float = BIAS_SCALE
    shuffle_seed: Optional[int] = None
    log_level: str = "INFO"

    def default_value(self, token):
        return dict(self.default_values).get(token, 0)


def parse_token_values(text):
    """'A=1,B=2,C=3' 형식 파싱. 빠진 토큰은 기본값 유지"""
    values = dict(DEFAULT_VALUES)
    if not text:
        return values
    for item in text.split(","):
        if not item.strip():
            continue
        token, sep, raw = item.partition("=")
        token = token.strip()
        if not sep or token not in TOKENS:
            logger.warning("ATTN_TOKEN_VALUES 항목 무시: %r", item)
            continue
        values[token] = parse_value(raw)
    return values


def _parse_float(text, default, name):
    if text is None or not text.strip():
        return default
    try:
        return float(text)
    except ValueError:
        logger.warning("%s=%r 를 실수로 읽을 수 없어 기본값 %s 사용", name, text, default)
        return default


def _parse_seed(text):
    if text is None or not text.strip():
        return None
    # numpy 시드는 음이 아닌 정수만 허용
    if not _SEED.fullmatch(text.strip()):
        logger.warning("ATTN_SHUFFLE_SEED=%r 무시 (0 이상의 정수가 아님)", text)
        return None
    return int(text)


def load_config(env_file="config.env"):
    """
    앱 설정 로드

    우선순위: 1) 환경변수, 2) config.env (load_dotenv는 기존 환경변수를 덮어쓰지 않음)
    """
    load_dotenv(env_file)

    config = AppConfig(
        default_values=tuple(parse_token_values(os.getenv("ATTN_TOKEN_VALUES")).items()),
        bias_scale=_parse_float(os.getenv("ATTN_BIAS_SCALE"), BIAS_SCALE, "ATTN_BIAS_SCALE"),
        shuffle_seed=_parse_seed(os.getenv("ATTN_SHUFFLE_SEED")),
        log_level=(os.getenv("ATTN_LOG_LEVEL") or "INFO").upper(),
    )
    logger.debug("설정 로드: %s", config)
    return config
