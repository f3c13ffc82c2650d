import json
import sys

from filecatalog.config.settings import Settings
from filecatalog.database.connection import create_pool
from filecatalog.logging.logger import Log
from filecatalog.pipeline.exceptions import PipelineError
from filecatalog.pipeline.ingestion import build_pipeline
from filecatalog.worker.handler import EventHandler


def main(argv: list[str] | None = None) -> int:
    """Entry point: read event -> open pool -> build pipeline -> handle batch.

    The event is read from the file named by the first argument, or stdin.
    """
    args = sys.argv[1:] if argv is None else argv
    settings = Settings()
    Log.configure(settings.log_level)

    if args:
        with open(args[0], encoding="utf-8") as handle:
            event = json.load(handle)
    else:
        event = json.load(sys.stdin)

    pool = create_pool(settings)
    try:
        handler = EventHandler(build_pipeline(settings, pool))
        summary = handler.handle(event)
    except PipelineError as exc:
        Log.error(f"Event processing failed: {exc}")
        return 1
    finally:
        pool.close()

    print(json.dumps(summary))
    return 0


if __name__ == "__main__":
    sys.exit(main())
