"""
Uniswap V3 Concentrated Liquidity Converter

가격, 틱, sqrtPriceX96, 유동성, 토큰 수량 간의 변환 라이브러리.
I/O와 상태가 없는 순수 함수로만 구성됩니다.
"""

import logging

__version__ = "0.1.0"

from .constants import Q96, TICK_BASE, FEE_TIERS, TICK_SPACINGS
from .config import TokenDecimals, DEFAULT_DECIMALS
from .exceptions import (
    ConversionError,
    InvalidPriceError,
    DegenerateRangeError,
    InvalidDecimalsError,
    InvalidTickSpacingError,
    InvalidAmountError,
    NumericOverflowError,
)
from .math import (
    nearest_tick,
    price_to_tick,
    tick_to_price,
    tick_spacing_for_fee,
    to_sqrt_x96,
    from_sqrt_x96,
    sort_prices,
    liquidity_for_amount0,
    liquidity_for_amount1,
    liquidity_for_amounts,
    amount0_for_liquidity,
    amount1_for_liquidity,
    amounts_for_liquidity,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())
