"""
Event Module - 이벤트 생성(Discord 게시), 수정, 삭제
"""

from .service import EventService

__all__ = ["EventService"]
