"""
Uniswap V3 변환 상수 정의

가격/틱/유동성 변환에 사용하는 상수들:
- Q96: sqrtPriceX96 인코딩에 사용 (2^96)
- TICK_BASE: 틱 한 칸의 가격 비율 (1.0001)
- DEFAULT_TOKEN_DECIMALS: 토큰 소수점 자릿수 기본값
- FEE_TIERS: 지원되는 수수료 티어
- TICK_SPACINGS: 각 수수료 티어별 틱 간격
"""

from typing import Dict

# Fixed-point 인코딩 상수
Q96: int = 2 ** 96

# price = 1.0001^tick
TICK_BASE: float = 1.0001

# ERC20 기본 소수점 자릿수
DEFAULT_TOKEN_DECIMALS: int = 18

# 수수료 티어 (hundredths of a bip)
# 500 = 0.05%, 3000 = 0.30%, 10000 = 1.00%
FEE_TIERS: Dict[int, str] = {
    100: "0.01%",
    500: "0.05%",
    3000: "0.30%",
    10000: "1.00%",
}

# 각 수수료 티어별 틱 간격
TICK_SPACINGS: Dict[int, int] = {
    100: 1,
    500: 10,
    3000: 60,
    10000: 200,
}
