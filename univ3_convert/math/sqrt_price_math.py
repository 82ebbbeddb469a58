"""
Sqrt Price Math - sqrtPriceX96 인코딩

Uniswap V3 풀은 가격을 sqrtPriceX96 고정소수점 형식으로 저장합니다.
sqrtPriceX96 = sqrt(price) * 2^96

References:
- https://docs.uniswap.org/sdk/guides/fetching-prices#understanding-sqrtprice

token1 1개당 token0 가격은 1 / from_sqrt_x96(...)로 얻습니다.
"""

import logging
import math
from typing import Optional

from ..config import TokenDecimals, resolve_decimals
from ..constants import DEFAULT_TOKEN_DECIMALS, Q96
from ..exceptions import NumericOverflowError
from .validation import check_price, check_result

logger = logging.getLogger(__name__)


def to_sqrt_x96(
    price: float,
    decimals0: int = DEFAULT_TOKEN_DECIMALS,
    decimals1: int = DEFAULT_TOKEN_DECIMALS,
    decimals: Optional[TokenDecimals] = None
) -> int:
    """Human-readable 가격을 sqrtPriceX96으로 변환

    sqrtPriceX96 = floor(sqrt(price × 10^|decimals0 - decimals1|) × 2^96)

    결과는 Python int이므로 uint160 범위를 넘어도 잘리지 않습니다.

    Args:
        price: 가격
        decimals0: token0 소수점 자릿수
        decimals1: token1 소수점 자릿수
        decimals: TokenDecimals 설정값 (주어지면 decimals0/decimals1 무시)

    Returns:
        sqrtPriceX96 값

    Raises:
        InvalidPriceError: 가격이 유한한 양수가 아닌 경우
        NumericOverflowError: 중간 계산이 float 범위를 넘는 경우

    Example:
        >>> to_sqrt_x96(0.000627337, 6, 18)
        1984403731948787316926650586759168
    """
    check_price(price)
    token_decimals = resolve_decimals(decimals0, decimals1, decimals)

    try:
        adjusted_price = token_decimals.scale_up(price)
        sqrt_price = math.sqrt(adjusted_price) * Q96
    except OverflowError as e:
        raise NumericOverflowError(f"sqrtPriceX96 계산 중 오버플로우: price={price}") from e

    if not math.isfinite(sqrt_price):
        logger.debug("sqrtPriceX96 overflow for price=%r decimals=%r", price, token_decimals)
        raise NumericOverflowError(f"sqrtPriceX96 계산 중 오버플로우: price={price}")

    return int(sqrt_price)


def from_sqrt_x96(
    x96_value: int,
    decimals0: int = DEFAULT_TOKEN_DECIMALS,
    decimals1: int = DEFAULT_TOKEN_DECIMALS,
    decimals: Optional[TokenDecimals] = None
) -> float:
    """sqrtPriceX96을 human-readable 가격으로 변환

    price = (sqrtPriceX96 / 2^96)^2 / 10^|decimals0 - decimals1|

    Args:
        x96_value: sqrtPriceX96 값
        decimals0: token0 소수점 자릿수
        decimals1: token1 소수점 자릿수
        decimals: TokenDecimals 설정값 (주어지면 decimals0/decimals1 무시)

    Returns:
        가격

    Raises:
        InvalidPriceError: sqrtPriceX96이 유한한 양수가 아닌 경우
        NumericOverflowError: 결과가 float 범위를 벗어나는 경우
    """
    check_price(x96_value, "x96_value")
    token_decimals = resolve_decimals(decimals0, decimals1, decimals)

    try:
        sqrt_price = x96_value / Q96
        price_raw = math.pow(sqrt_price, 2)
    except OverflowError as e:
        raise NumericOverflowError(f"가격 계산 중 오버플로우: sqrtPriceX96={x96_value}") from e
    return check_result(token_decimals.scale_down(price_raw), "price")
