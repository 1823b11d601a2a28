"""
Age Tests - 생년월일 기반 나이 계산 테스트
"""
from datetime import date

from app.club.age import calculate_age


class TestCalculateAge:
    """나이 계산 테스트"""

    def test_day_before_birthday(self):
        """생일 전날 - 아직 한 살 적음"""
        assert calculate_age(date(2000, 6, 15), date(2024, 6, 14)) == 23

    def test_on_birthday(self):
        """생일 당일 - 한 살 증가"""
        assert calculate_age(date(2000, 6, 15), date(2024, 6, 15)) == 24

    def test_day_after_birthday_same_month(self):
        """같은 달 생일 다음날"""
        assert calculate_age(date(2000, 6, 15), date(2024, 6, 16)) == 24

    def test_later_month_earlier_day(self):
        """생일 달은 지났지만 날짜 숫자는 작음 (3/5 vs 1/20)"""
        assert calculate_age(date(2000, 1, 20), date(2024, 3, 5)) == 24

    def test_earlier_month_later_day(self):
        """생일 달 이전 (4/30 vs 6/15)"""
        assert calculate_age(date(2000, 6, 15), date(2024, 4, 30)) == 23

    def test_leap_day_birthday(self):
        """2월 29일생 - 평년에는 3월 1일부터 증가"""
        assert calculate_age(date(2004, 2, 29), date(2023, 2, 28)) == 18
        assert calculate_age(date(2004, 2, 29), date(2023, 3, 1)) == 19

    def test_no_birth_date(self):
        """생년월일 없음"""
        assert calculate_age(None) is None

    def test_defaults_to_today(self):
        """기준일 생략 시 오늘"""
        today = date.today()
        birth = date(today.year - 20, 1, 1)
        assert calculate_age(birth) == 20
