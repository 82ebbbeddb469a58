"""
Tick Math - Price ↔ Tick 변환

Uniswap V3의 가격 공간은 1.0001^tick 단위로 이산화됩니다.
틱은 풀의 tick spacing 배수로 스냅됩니다.

References:
- 백서 Section 6.1: Ticks and Tick Spacing

핵심 공식:
    price = 1.0001^tick × 10^(decimals0 - decimals1)
    tick = log₁.₀₀₀₁(price / 10^(decimals0 - decimals1))

주의: 틱 변환은 부호 있는 소수점 차이를 사용합니다. 유동성 변환과
sqrtPriceX96 변환은 절대 차이를 사용합니다.
"""

import logging
import math
import numbers
from typing import Optional

from ..config import TokenDecimals, resolve_decimals
from ..constants import DEFAULT_TOKEN_DECIMALS, FEE_TIERS, TICK_BASE, TICK_SPACINGS
from ..exceptions import InvalidTickSpacingError, NumericOverflowError
from .validation import check_price, check_result, check_tick_spacing

logger = logging.getLogger(__name__)


def round_half_away(value: float) -> int:
    """0에서 먼 쪽으로 반올림 (4.5 → 5, -4.5 → -5)

    Python 내장 round()는 banker's rounding이므로 사용하지 않습니다.
    """
    magnitude = abs(value)
    rounded = math.floor(magnitude)
    if magnitude - rounded >= 0.5:
        rounded += 1
    return rounded if value >= 0 else -rounded


def nearest_tick(tick: int, spacing: int) -> int:
    """틱을 가장 가까운 tick spacing 배수로 스냅

    spacing × round(tick / spacing), 중간값은 0에서 먼 쪽으로.

    Args:
        tick: 스냅할 틱
        spacing: 틱 간격 (양의 정수)

    Returns:
        spacing의 배수인 틱

    Raises:
        InvalidTickSpacingError: spacing이 양의 정수가 아닌 경우

    Example:
        >>> nearest_tick(45, 10)
        50
        >>> nearest_tick(44, 10)
        40
    """
    check_tick_spacing(spacing, "spacing")
    if isinstance(tick, numbers.Integral):
        # 정수 틱은 float 변환 없이 정확히 계산
        quotient, remainder = divmod(abs(tick), spacing)
        if 2 * remainder >= spacing:
            quotient += 1
        return spacing * (quotient if tick >= 0 else -quotient)
    return spacing * round_half_away(tick / spacing)


def price_to_tick(
    price: float,
    tick_spacing: int,
    decimals0: int = DEFAULT_TOKEN_DECIMALS,
    decimals1: int = DEFAULT_TOKEN_DECIMALS,
    decimals: Optional[TokenDecimals] = None
) -> int:
    """Human-readable 가격을 tick spacing에 맞춘 틱으로 변환

    tick = round(log(price / 10^(decimals0 - decimals1)) / log(1.0001))
    이후 nearest_tick으로 스냅합니다.

    Args:
        price: 가격 (token0 1개당 token1)
        tick_spacing: 풀의 틱 간격
        decimals0: token0 소수점 자릿수
        decimals1: token1 소수점 자릿수
        decimals: TokenDecimals 설정값 (주어지면 decimals0/decimals1 무시)

    Returns:
        tick_spacing의 배수인 틱

    Raises:
        InvalidPriceError: 가격이 유한한 양수가 아닌 경우
        InvalidTickSpacingError: tick_spacing이 양의 정수가 아닌 경우
        InvalidDecimalsError: 소수점 자릿수가 유효하지 않은 경우

    Example:
        >>> price_to_tick(0.000551413, 10, 6, 18)
        201290
    """
    check_price(price)
    check_tick_spacing(tick_spacing)
    token_decimals = resolve_decimals(decimals0, decimals1, decimals)

    try:
        ratio = price / math.pow(10, token_decimals.signed_exponent)
    except (OverflowError, ZeroDivisionError) as e:
        raise NumericOverflowError(f"틱 계산 중 오버플로우: price={price}") from e
    check_result(ratio, "tick ratio")

    tick = round_half_away(math.log(ratio) / math.log(TICK_BASE))
    return nearest_tick(tick, tick_spacing)


def tick_to_price(
    tick: int,
    decimals0: int = DEFAULT_TOKEN_DECIMALS,
    decimals1: int = DEFAULT_TOKEN_DECIMALS,
    decimals: Optional[TokenDecimals] = None
) -> float:
    """틱을 human-readable 가격으로 변환

    price = 1.0001^tick × 10^(decimals0 - decimals1)

    Args:
        tick: 틱 인덱스
        decimals0: token0 소수점 자릿수
        decimals1: token1 소수점 자릿수
        decimals: TokenDecimals 설정값 (주어지면 decimals0/decimals1 무시)

    Returns:
        가격 (token0 1개당 token1)

    Raises:
        NumericOverflowError: 결과가 float 범위를 벗어나는 경우

    Example:
        >>> tick_to_price(201290, 6, 18)
        0.000551412440019572
    """
    token_decimals = resolve_decimals(decimals0, decimals1, decimals)
    try:
        price = math.pow(TICK_BASE, tick) * math.pow(10, token_decimals.signed_exponent)
    except OverflowError as e:
        raise NumericOverflowError(f"가격 계산 중 오버플로우: tick={tick}") from e
    return check_result(price, "price")


def tick_spacing_for_fee(fee_tier: int) -> int:
    """수수료 티어에 해당하는 틱 간격 반환

    Args:
        fee_tier: 수수료 티어 (100, 500, 3000, 10000)

    Returns:
        틱 간격
    """
    if fee_tier not in FEE_TIERS:
        logger.debug("unknown fee tier %r", fee_tier)
        raise InvalidTickSpacingError(
            f"지원하지 않는 수수료 티어: {fee_tier} (지원: {sorted(FEE_TIERS)})"
        )
    return TICK_SPACINGS[fee_tier]
