"""
Club Membership 서버 실행
"""
import argparse

import uvicorn
from loguru import logger

from app.config import get_settings
from app.server import configure_logging


def main():
    parser = argparse.ArgumentParser(description="Club Membership API 서버")
    parser.add_argument("--host", default="0.0.0.0", help="바인드 주소")
    parser.add_argument("--port", type=int, default=8000, help="포트")
    parser.add_argument("--reload", action="store_true", help="코드 변경 시 자동 재시작")
    args = parser.parse_args()

    configure_logging(get_settings())
    logger.info(f"서버 시작: {args.host}:{args.port}")

    uvicorn.run(
        "app.server:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_config=None
    )


if __name__ == "__main__":
    main()
