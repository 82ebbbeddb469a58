"""
입력 검증 - 각 변환 함수의 경계에서 계산 전에 호출
"""

import logging
import math
import numbers

from ..exceptions import (
    DegenerateRangeError,
    InvalidAmountError,
    InvalidPriceError,
    InvalidTickSpacingError,
    NumericOverflowError,
)

logger = logging.getLogger(__name__)


def _is_finite(value: numbers.Real) -> bool:
    # 정수는 float 범위를 넘어도 유한
    return isinstance(value, numbers.Integral) or math.isfinite(value)


def check_price(price: float, name: str = "price") -> float:
    """가격이 유한한 양수인지 확인"""
    if not isinstance(price, numbers.Real) or isinstance(price, bool):
        logger.debug("rejected %s=%r", name, price)
        raise InvalidPriceError(f"{name}는 실수여야 합니다: {price!r}")
    if not _is_finite(price) or price <= 0:
        logger.debug("rejected %s=%r", name, price)
        raise InvalidPriceError(f"{name}는 유한한 양수여야 합니다: {price}")
    return price


def check_amount(amount: float, name: str = "amount") -> float:
    """토큰 수량/유동성이 유한하고 0 이상인지 확인"""
    if not isinstance(amount, numbers.Real) or isinstance(amount, bool):
        logger.debug("rejected %s=%r", name, amount)
        raise InvalidAmountError(f"{name}는 실수여야 합니다: {amount!r}")
    if not _is_finite(amount) or amount < 0:
        logger.debug("rejected %s=%r", name, amount)
        raise InvalidAmountError(f"{name}는 유한한 0 이상의 값이어야 합니다: {amount}")
    return amount


def check_tick_spacing(spacing: int, name: str = "tick_spacing") -> int:
    """틱 간격이 양의 정수인지 확인"""
    if isinstance(spacing, bool) or not isinstance(spacing, numbers.Integral):
        logger.debug("rejected %s=%r", name, spacing)
        raise InvalidTickSpacingError(f"{name}는 정수여야 합니다: {spacing!r}")
    if spacing <= 0:
        logger.debug("rejected %s=%r", name, spacing)
        raise InvalidTickSpacingError(f"{name}는 양수여야 합니다: {spacing}")
    return spacing


def check_result(value: float, what: str) -> float:
    """계산 결과가 유한한 양수인지 확인 (오버플로우/언더플로우)"""
    if not math.isfinite(value) or value <= 0:
        logger.debug("%s out of float range: %r", what, value)
        raise NumericOverflowError(f"{what} 계산 결과가 float 범위를 벗어났습니다: {value}")
    return value


def check_sqrt_range(s_lower: float, s_upper: float) -> None:
    """sqrt 변환된 범위의 폭이 0이 아닌지 확인"""
    if s_upper <= s_lower:
        logger.debug("rejected zero-width sqrt range [%r, %r]", s_lower, s_upper)
        raise DegenerateRangeError(
            f"가격 범위의 폭이 0입니다: sqrt 하한 {s_lower} == sqrt 상한 {s_upper}"
        )

