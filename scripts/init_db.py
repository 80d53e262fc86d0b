import logging

from app.db.engine import get_engine
from app.db.schema import metadata

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s",
)
logger = logging.getLogger(__name__)


def main():
    engine = get_engine()
    metadata.drop_all(engine)
    metadata.create_all(engine)
    logger.info("DB schema created at %s", engine.url)

if __name__ == "__main__":
    main()
