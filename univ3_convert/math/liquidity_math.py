"""
Liquidity Math - 유동성 ↔ 토큰 수량 변환

Uniswap V3의 집중화된 유동성(Concentrated Liquidity) 계산.
특정 가격 범위에서의 토큰 수량과 유동성 간의 변환.
모든 가격은 human-readable float이며, sqrt 변환은 sqrtPriceX96 인코딩이
아닌 단순 제곱근입니다.

References:
- Uniswap V3 Periphery: contracts/libraries/LiquidityAmounts.sol
- 백서 Section 6.2.1: Concentrated Liquidity

핵심 공식:
    L = Δx * √P_a * √P_b / (√P_b - √P_a)  # token0 기준
    L = Δy / (√P_b - √P_a)                # token1 기준
    Δx = L * (√P_b - √P_a) / (√P_a * √P_b)
    Δy = L * (√P_b - √P_a)

유동성은 10^|decimals0 - decimals1|을 곱한 뒤 정수로 자르고,
토큰 수량은 같은 값으로 나눈 float로 반환합니다.
"""

import logging
import math
from typing import Optional, Tuple

from ..config import TokenDecimals, resolve_decimals
from ..constants import DEFAULT_TOKEN_DECIMALS
from ..exceptions import DegenerateRangeError, NumericOverflowError
from .validation import check_amount, check_price, check_sqrt_range

logger = logging.getLogger(__name__)


def sort_prices(price_a: float, price_b: float) -> Tuple[float, float]:
    """가격 범위를 (하한, 상한)으로 정렬

    호출자가 어느 틱 경계를 먼저 넘기든 결과는 같습니다.

    Raises:
        InvalidPriceError: 가격이 유한한 양수가 아닌 경우
        DegenerateRangeError: 두 가격이 같은 경우
    """
    check_price(price_a, "price_a")
    check_price(price_b, "price_b")
    if price_a == price_b:
        logger.debug("rejected zero-width range %r", price_a)
        raise DegenerateRangeError(f"가격 범위의 폭이 0입니다: {price_a} == {price_b}")

    return min(price_a, price_b), max(price_a, price_b)


def liquidity_for_amount0(
    amount0: float,
    price_a: float,
    price_b: float,
    decimals0: int = DEFAULT_TOKEN_DECIMALS,
    decimals1: int = DEFAULT_TOKEN_DECIMALS,
    decimals: Optional[TokenDecimals] = None
) -> int:
    """amount0에서 유동성 계산

    주어진 token0 양으로 가격 범위 전체에 공급할 수 있는 유동성.

    공식: L = Δx * √P_a * √P_b / (√P_b - √P_a)

    Args:
        amount0: token0 수량
        price_a: 첫 번째 틱 경계 가격
        price_b: 두 번째 틱 경계 가격
        decimals0: token0 소수점 자릿수
        decimals1: token1 소수점 자릿수
        decimals: TokenDecimals 설정값 (주어지면 decimals0/decimals1 무시)

    Returns:
        유동성 (0 방향으로 자른 정수)

    Example:
        >>> liquidity_for_amount0(100, 110 / 100, 100 / 110)
        1048
    """
    check_amount(amount0, "amount0")
    lower, upper = sort_prices(price_a, price_b)
    token_decimals = resolve_decimals(decimals0, decimals1, decimals)

    liquidity = _liquidity_from_amount0(amount0, _sqrt_price(lower), _sqrt_price(upper))
    return _to_liquidity(liquidity, token_decimals)


def liquidity_for_amount1(
    amount1: float,
    price_a: float,
    price_b: float,
    decimals0: int = DEFAULT_TOKEN_DECIMALS,
    decimals1: int = DEFAULT_TOKEN_DECIMALS,
    decimals: Optional[TokenDecimals] = None
) -> int:
    """amount1에서 유동성 계산

    공식: L = Δy / (√P_b - √P_a)

    Args:
        amount1: token1 수량
        price_a: 첫 번째 틱 경계 가격
        price_b: 두 번째 틱 경계 가격
        decimals0: token0 소수점 자릿수
        decimals1: token1 소수점 자릿수
        decimals: TokenDecimals 설정값 (주어지면 decimals0/decimals1 무시)

    Returns:
        유동성 (0 방향으로 자른 정수)
    """
    check_amount(amount1, "amount1")
    lower, upper = sort_prices(price_a, price_b)
    token_decimals = resolve_decimals(decimals0, decimals1, decimals)

    liquidity = _liquidity_from_amount1(amount1, _sqrt_price(lower), _sqrt_price(upper))
    return _to_liquidity(liquidity, token_decimals)


def liquidity_for_amounts(
    amount0: float,
    amount1: float,
    current_price: float,
    price_a: float,
    price_b: float,
    decimals0: int = DEFAULT_TOKEN_DECIMALS,
    decimals1: int = DEFAULT_TOKEN_DECIMALS,
    decimals: Optional[TokenDecimals] = None
) -> int:
    """토큰 수량에서 유동성 계산

    현재 가격과 범위, 두 토큰 수량이 주어졌을 때
    민트 가능한 최대 유동성을 계산합니다.

    Args:
        amount0: token0 수량
        amount1: token1 수량
        current_price: 현재 풀 가격
        price_a: 첫 번째 틱 경계 가격
        price_b: 두 번째 틱 경계 가격
        decimals0: token0 소수점 자릿수
        decimals1: token1 소수점 자릿수
        decimals: TokenDecimals 설정값 (주어지면 decimals0/decimals1 무시)

    Returns:
        유동성 (범위 내에서는 두 제약 조건 중 작은 값)

    Example:
        >>> liquidity_for_amounts(100, 200, 1, 100 / 110, 110 / 100)
        2148
    """
    check_amount(amount0, "amount0")
    check_amount(amount1, "amount1")
    check_price(current_price, "current_price")
    lower, upper = sort_prices(price_a, price_b)
    token_decimals = resolve_decimals(decimals0, decimals1, decimals)

    s_current = _sqrt_price(current_price)
    s_lower = _sqrt_price(lower)
    s_upper = _sqrt_price(upper)

    if s_current <= s_lower:
        # 가격이 범위 아래: token0만 사용
        logger.debug("current price %r at or below range, using amount0", current_price)
        liquidity = _liquidity_from_amount0(amount0, s_lower, s_upper)

    elif s_current < s_upper:
        # 가격이 범위 내: 양쪽 토큰 사용, 작은 값 반환
        liquidity0 = _liquidity_from_amount0(amount0, s_current, s_upper)
        liquidity1 = _liquidity_from_amount1(amount1, s_lower, s_current)
        logger.debug("current price %r in range, L0=%r L1=%r", current_price, liquidity0, liquidity1)
        liquidity = min(liquidity0, liquidity1)

    else:
        # 가격이 범위 위: token1만 사용
        logger.debug("current price %r at or above range, using amount1", current_price)
        liquidity = _liquidity_from_amount1(amount1, s_lower, s_upper)

    return _to_liquidity(liquidity, token_decimals)


def amount0_for_liquidity(
    liquidity: float,
    price_a: float,
    price_b: float,
    decimals0: int = DEFAULT_TOKEN_DECIMALS,
    decimals1: int = DEFAULT_TOKEN_DECIMALS,
    decimals: Optional[TokenDecimals] = None
) -> float:
    """유동성에서 token0 수량 계산

    공식: Δx = L * (√P_b - √P_a) / (√P_a * √P_b)

    Args:
        liquidity: 유동성
        price_a: 첫 번째 틱 경계 가격
        price_b: 두 번째 틱 경계 가격
        decimals0: token0 소수점 자릿수
        decimals1: token1 소수점 자릿수
        decimals: TokenDecimals 설정값 (주어지면 decimals0/decimals1 무시)

    Returns:
        token0 수량 (float)

    Example:
        >>> amount0_for_liquidity(1048, 100 / 110, 110 / 100)
        99.9228793529381
    """
    check_amount(liquidity, "liquidity")
    lower, upper = sort_prices(price_a, price_b)
    token_decimals = resolve_decimals(decimals0, decimals1, decimals)

    return _amount0_from_liquidity(liquidity, _sqrt_price(lower), _sqrt_price(upper), token_decimals)


def amount1_for_liquidity(
    liquidity: float,
    price_a: float,
    price_b: float,
    decimals0: int = DEFAULT_TOKEN_DECIMALS,
    decimals1: int = DEFAULT_TOKEN_DECIMALS,
    decimals: Optional[TokenDecimals] = None
) -> float:
    """유동성에서 token1 수량 계산

    공식: Δy = L * (√P_b - √P_a)

    Args:
        liquidity: 유동성
        price_a: 첫 번째 틱 경계 가격
        price_b: 두 번째 틱 경계 가격
        decimals0: token0 소수점 자릿수
        decimals1: token1 소수점 자릿수
        decimals: TokenDecimals 설정값 (주어지면 decimals0/decimals1 무시)

    Returns:
        token1 수량 (float)
    """
    check_amount(liquidity, "liquidity")
    lower, upper = sort_prices(price_a, price_b)
    token_decimals = resolve_decimals(decimals0, decimals1, decimals)

    return _amount1_from_liquidity(liquidity, _sqrt_price(lower), _sqrt_price(upper), token_decimals)


def amounts_for_liquidity(
    liquidity: float,
    current_price: float,
    price_a: float,
    price_b: float,
    decimals0: int = DEFAULT_TOKEN_DECIMALS,
    decimals1: int = DEFAULT_TOKEN_DECIMALS,
    decimals: Optional[TokenDecimals] = None
) -> Tuple[float, float]:
    """유동성에서 토큰 수량 계산

    현재 가격과 범위, 유동성이 주어졌을 때
    포지션이 보유한 토큰 수량을 계산합니다.

    Args:
        liquidity: 유동성
        current_price: 현재 풀 가격
        price_a: 첫 번째 틱 경계 가격
        price_b: 두 번째 틱 경계 가격
        decimals0: token0 소수점 자릿수
        decimals1: token1 소수점 자릿수
        decimals: TokenDecimals 설정값 (주어지면 decimals0/decimals1 무시)

    Returns:
        (amount0, amount1) 튜플. 범위 밖에서는 한쪽이 0.0
    """
    check_amount(liquidity, "liquidity")
    check_price(current_price, "current_price")
    lower, upper = sort_prices(price_a, price_b)
    token_decimals = resolve_decimals(decimals0, decimals1, decimals)

    s_current = _sqrt_price(current_price)
    s_lower = _sqrt_price(lower)
    s_upper = _sqrt_price(upper)

    if s_current <= s_lower:
        # 가격이 범위 아래: token0만 보유
        logger.debug("current price %r at or below range, holding token0 only", current_price)
        amount0 = _amount0_from_liquidity(liquidity, s_lower, s_upper, token_decimals)
        amount1 = 0.0

    elif s_current < s_upper:
        # 가격이 범위 내: 양쪽 토큰 보유
        logger.debug("current price %r in range, holding both tokens", current_price)
        amount0 = _amount0_from_liquidity(liquidity, s_current, s_upper, token_decimals)
        amount1 = _amount1_from_liquidity(liquidity, s_lower, s_current, token_decimals)

    else:
        # 가격이 범위 위: token1만 보유
        logger.debug("current price %r at or above range, holding token1 only", current_price)
        amount0 = 0.0
        amount1 = _amount1_from_liquidity(liquidity, s_lower, s_upper, token_decimals)

    return amount0, amount1


# === 내부 헬퍼 함수 ===

def _sqrt_price(price: float) -> float:
    # sqrtPriceX96 인코딩과 별개인 단순 제곱근
    try:
        return math.sqrt(price)
    except OverflowError as e:
        raise NumericOverflowError(f"가격이 float 범위를 벗어났습니다: {price}") from e


def _liquidity_from_amount0(amount0: float, s_lower: float, s_upper: float) -> float:
    check_sqrt_range(s_lower, s_upper)
    try:
        return amount0 * s_lower * s_upper / (s_upper - s_lower)
    except OverflowError as e:
        raise NumericOverflowError(f"유동성 계산 중 오버플로우: amount0={amount0}") from e


def _liquidity_from_amount1(amount1: float, s_lower: float, s_upper: float) -> float:
    check_sqrt_range(s_lower, s_upper)
    try:
        return amount1 / (s_upper - s_lower)
    except OverflowError as e:
        raise NumericOverflowError(f"유동성 계산 중 오버플로우: amount1={amount1}") from e


def _amount0_from_liquidity(
    liquidity: float,
    s_lower: float,
    s_upper: float,
    token_decimals: TokenDecimals
) -> float:
    check_sqrt_range(s_lower, s_upper)
    try:
        amount0 = liquidity * (s_upper - s_lower) / (s_lower * s_upper)
    except OverflowError as e:
        raise NumericOverflowError(f"amount0 계산 중 오버플로우: liquidity={liquidity}") from e
    return token_decimals.scale_down(amount0)


def _amount1_from_liquidity(
    liquidity: float,
    s_lower: float,
    s_upper: float,
    token_decimals: TokenDecimals
) -> float:
    check_sqrt_range(s_lower, s_upper)
    try:
        amount1 = liquidity * (s_upper - s_lower)
    except OverflowError as e:
        raise NumericOverflowError(f"amount1 계산 중 오버플로우: liquidity={liquidity}") from e
    return token_decimals.scale_down(amount1)


def _to_liquidity(liquidity: float, token_decimals: TokenDecimals) -> int:
    # 0 방향으로 자름. scale_up 결과는 항상 유한
    return int(token_decimals.scale_up(liquidity))
