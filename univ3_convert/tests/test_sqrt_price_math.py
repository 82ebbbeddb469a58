"""
Sqrt Price Math 테스트

sqrtPriceX96 인코딩/디코딩을 테스트합니다.
"""

import pytest

from ..math.sqrt_price_math import to_sqrt_x96, from_sqrt_x96
from ..config import TokenDecimals
from ..constants import Q96
from ..exceptions import ConversionError, InvalidPriceError, NumericOverflowError


USDC_WETH_SQRT_X96 = 1984403731948787316926650586759168


class TestToSqrtX96:
    """to_sqrt_x96 테스트"""

    def test_price_1(self):
        """가격 1 -> 2^96"""
        assert to_sqrt_x96(1.0) == Q96

    def test_known_value(self):
        """USDC(6)/WETH(18) 예시"""
        assert to_sqrt_x96(0.000627337, 6, 18) == USDC_WETH_SQRT_X96

    def test_absolute_decimal_exponent(self):
        """sqrtPriceX96은 절대 소수점 차이를 사용 - 순서 무관"""
        assert to_sqrt_x96(0.000627337, 6, 18) == to_sqrt_x96(0.000627337, 18, 6)

    def test_token_decimals_config(self):
        result = to_sqrt_x96(0.000627337, decimals=TokenDecimals(6, 18))
        assert result == USDC_WETH_SQRT_X96

    def test_returns_int(self):
        assert isinstance(to_sqrt_x96(3000.5), int)

    def test_exceeds_uint160(self):
        """Python int는 uint160 범위를 넘어도 잘리지 않음"""
        result = to_sqrt_x96(1e200)
        assert result > 2 ** 160

    def test_monotonic(self):
        prices = [0.001, 0.5, 1.0, 2.0, 1000.0]
        encoded = [to_sqrt_x96(p) for p in prices]
        assert encoded == sorted(encoded)

    @pytest.mark.parametrize("price", [0, -1.0, float("nan"), float("inf")])
    def test_invalid_price(self, price):
        with pytest.raises(InvalidPriceError):
            to_sqrt_x96(price)

    def test_overflow(self):
        """float 범위를 넘으면 NumericOverflowError"""
        with pytest.raises(NumericOverflowError):
            to_sqrt_x96(1e300, 0, 18)

    def test_huge_integer_price(self):
        with pytest.raises(NumericOverflowError):
            to_sqrt_x96(10 ** 400)

    def test_overflow_is_overflow_error(self):
        with pytest.raises(OverflowError):
            to_sqrt_x96(1.0, 0, 400)


class TestFromSqrtX96:
    """from_sqrt_x96 테스트"""

    def test_q96_is_price_1(self):
        assert from_sqrt_x96(Q96) == pytest.approx(1.0)

    def test_known_value(self):
        result = from_sqrt_x96(USDC_WETH_SQRT_X96, 6, 18)
        assert result == pytest.approx(6.273370000000002e-4, rel=1e-12)

    def test_roundtrip(self):
        """가격 -> sqrtPriceX96 -> 가격 왕복"""
        for price in [1e-6, 0.001, 1.0, 3000.0, 1e6]:
            for decimals0, decimals1 in [(18, 18), (6, 18), (8, 6)]:
                encoded = to_sqrt_x96(price, decimals0, decimals1)
                result = from_sqrt_x96(encoded, decimals0, decimals1)
                assert result == pytest.approx(price, rel=1e-12)

    @pytest.mark.parametrize("value", [float("nan"), float("inf")])
    def test_non_finite_value(self, value):
        with pytest.raises(InvalidPriceError):
            from_sqrt_x96(value)

    def test_overflow(self):
        """(x96 / 2^96)^2이 float 범위를 넘는 경우"""
        with pytest.raises(NumericOverflowError):
            from_sqrt_x96(10 ** 200)
        with pytest.raises(ConversionError):
            from_sqrt_x96(10 ** 200)

    @pytest.mark.parametrize("value", [0, -Q96])
    def test_invalid_value(self, value):
        with pytest.raises(InvalidPriceError):
            from_sqrt_x96(value)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
