import argparse
import logging
from app.core.config import settings
from app.core.database import engine
from app.core.logging import configure_logging
from app.db.init_db import drop_db, init_db

logger = logging.getLogger("app.main")

def main(argv=None):
    parser = argparse.ArgumentParser(prog="learning-platform-schema", description=settings.PROJECT_NAME)
    parser.add_argument("command", choices=["init", "drop"], nargs="?", default="init",
                        help="create the schema (default) or drop it")
    args = parser.parse_args(argv)

    configure_logging()
    logger.info(f"{settings.PROJECT_NAME} {settings.VERSION} using {engine.url.render_as_string(hide_password=True)}")

    if args.command == "drop":
        drop_db(engine)
    else:
        init_db(engine)

if __name__ == "__main__":
    main()
