"""
Feedback Module - 이벤트 피드백
"""

from .service import FeedbackService

__all__ = ["FeedbackService"]
