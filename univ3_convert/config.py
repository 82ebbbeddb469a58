"""
토큰 소수점 설정

변환 함수에 전달되는 token0/token1 소수점 자릿수 설정값.
기본값은 {decimals0: 18, decimals1: 18}.
"""

import logging
import math
import numbers
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from .constants import DEFAULT_TOKEN_DECIMALS
from .exceptions import InvalidDecimalsError, NumericOverflowError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TokenDecimals:
    """token0/token1 소수점 자릿수

    유동성 변환과 sqrtPriceX96 변환은 절대 차이 |decimals0 - decimals1|를,
    틱 변환은 부호 있는 차이 decimals0 - decimals1을 사용합니다.
    """
    decimals0: int = DEFAULT_TOKEN_DECIMALS
    decimals1: int = DEFAULT_TOKEN_DECIMALS

    def __post_init__(self):
        for name in ("decimals0", "decimals1"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, numbers.Integral):
                logger.debug("rejected %s=%r", name, value)
                raise InvalidDecimalsError(f"{name}는 정수여야 합니다: {value!r}")
            if value < 0:
                logger.debug("rejected %s=%r", name, value)
                raise InvalidDecimalsError(f"{name}는 0 이상이어야 합니다: {value}")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TokenDecimals":
        return cls(
            decimals0=data.get("decimals0", DEFAULT_TOKEN_DECIMALS),
            decimals1=data.get("decimals1", DEFAULT_TOKEN_DECIMALS),
        )

    @property
    def signed_exponent(self) -> int:
        """decimals0 - decimals1 (틱 변환용)"""
        return self.decimals0 - self.decimals1

    @property
    def absolute_exponent(self) -> int:
        """|decimals0 - decimals1| (유동성/sqrtPriceX96 변환용)"""
        return abs(self.decimals0 - self.decimals1)

    def scale_up(self, value: float) -> float:
        """value × 10^|decimals0 - decimals1|

        Raises:
            NumericOverflowError: 결과가 float 범위를 넘는 경우
        """
        try:
            scaled = value * math.pow(10, self.absolute_exponent)
        except OverflowError as e:
            raise NumericOverflowError(f"소수점 스케일 중 오버플로우: {value!r} × 10^{self.absolute_exponent}") from e
        return _check_finite(scaled, value, self)

    def scale_down(self, value: float) -> float:
        """value / 10^|decimals0 - decimals1|"""
        try:
            scaled = value / math.pow(10, self.absolute_exponent)
        except OverflowError as e:
            raise NumericOverflowError(f"소수점 스케일 중 오버플로우: {value!r} / 10^{self.absolute_exponent}") from e
        return _check_finite(scaled, value, self)


def _check_finite(scaled: float, value: float, token_decimals: TokenDecimals) -> float:
    if not math.isfinite(scaled):
        logger.debug("non-finite scale result for %r with %r", value, token_decimals)
        raise NumericOverflowError(f"소수점 스케일 결과가 유한하지 않습니다: {value!r}")
    return scaled


DEFAULT_DECIMALS = TokenDecimals()


def resolve_decimals(
    decimals0: int = DEFAULT_TOKEN_DECIMALS,
    decimals1: int = DEFAULT_TOKEN_DECIMALS,
    decimals: Optional[TokenDecimals] = None
) -> TokenDecimals:
    """정수 인자 또는 TokenDecimals 설정값을 TokenDecimals로 정규화

    decimals가 주어지면 decimals0/decimals1보다 우선합니다.
    """
    if decimals is not None:
        if not isinstance(decimals, TokenDecimals):
            raise InvalidDecimalsError(
                f"decimals는 TokenDecimals여야 합니다: {type(decimals).__name__}"
            )
        return decimals
    return TokenDecimals(decimals0, decimals1)
