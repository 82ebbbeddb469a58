"""
변환 오류 정의

모든 오류는 ValueError를 상속하므로 `except ValueError`로도 잡을 수 있습니다.
"""


class ConversionError(ValueError):
    """변환 입력 오류의 기본 클래스"""
    pass


class InvalidPriceError(ConversionError):
    """가격이 0 이하이거나 유한하지 않음"""
    pass


class DegenerateRangeError(ConversionError):
    """가격 범위의 하한과 상한이 같음 (폭 0)"""
    pass


class InvalidDecimalsError(ConversionError):
    """토큰 소수점 자릿수가 음수이거나 정수가 아님"""
    pass


class InvalidTickSpacingError(ConversionError):
    """틱 간격이 양의 정수가 아니거나 지원하지 않는 수수료 티어"""
    pass


class InvalidAmountError(ConversionError):
    """토큰 수량 또는 유동성이 음수이거나 NaN"""
    pass


class NumericOverflowError(ConversionError, OverflowError):
    """부동소수점 중간값이 표현 범위를 벗어남"""
    pass
