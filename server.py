import logging

from aiohttp import web
from dotenv import load_dotenv

from rss_articles import create_app
from rss_articles.config import load_settings
from rss_articles.log import setup_logging

# .env 파일에서 환경 변수를 로드합니다.
load_dotenv()

logger = logging.getLogger(__name__)


def main() -> None:
    settings = load_settings()
    setup_logging(settings.log_level, settings.log_file)

    logger.info("Starting RSS API on http://%s:%s", settings.host, settings.port)
    web.run_app(create_app(), host=settings.host, port=settings.port, print=None)


if __name__ == "__main__":
    main()
