"""
Math layer for Uniswap V3 conversions

가격/틱/유동성 변환 함수들:
- tick_math: Price ↔ Tick 변환
- sqrt_price_math: sqrtPriceX96 인코딩
- liquidity_math: 유동성 ↔ 토큰 수량 변환
"""

from .tick_math import (
    nearest_tick,
    price_to_tick,
    tick_to_price,
    tick_spacing_for_fee,
)
from .sqrt_price_math import (
    to_sqrt_x96,
    from_sqrt_x96,
)
from .liquidity_math import (
    sort_prices,
    liquidity_for_amount0,
    liquidity_for_amount1,
    liquidity_for_amounts,
    amount0_for_liquidity,
    amount1_for_liquidity,
    amounts_for_liquidity,
)
