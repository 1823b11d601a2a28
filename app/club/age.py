"""
나이 계산 유틸리티
"""
from datetime import date
from typing import Optional


def calculate_age(birth_date: Optional[date], today: Optional[date] = None) -> Optional[int]:
    """
    나이 계산

    Args:
        birth_date: 생년월일
        today: 기준일 (기본값: 오늘)

    Returns:
        만 나이 (생일 당일부터 한 살 증가)
    """
    if not birth_date:
        return None

    today = today or date.today()
    age = today.year - birth_date.year

    # 올해 생일이 아직 안 지났으면 -1
    if (today.month, today.day) < (birth_date.month, birth_date.day):
        age -= 1

    return age
