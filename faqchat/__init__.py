"""
FAQ chat assistant package.

Components:
- Flask application and API routes
- Keyword retrieval over the FAQ database
- Prompt augmentation and LLM integration with retries
- A small chat client for talking to the API
"""

import logging
import os

LOG_FORMAT = "%(asctime)s %(levelname)s: %(pathname)s:%(lineno)d %(message)s"
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Must run before any submodule creates its logger
logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)


class RelativePathFilter(logging.Filter):
    """Shorten record paths to be relative to the project root.

    Editors and terminals turn ``path:line`` into a link when the path is
    relative to the open workspace.
    """

    def __init__(self, root: str) -> None:
        super().__init__()
        self.root = root

    def filter(self, record: logging.LogRecord) -> bool:
        if record.pathname.startswith(self.root):
            record.pathname = os.path.relpath(record.pathname, self.root)
        return True


_project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
for _handler in logging.getLogger().handlers:
    _handler.addFilter(RelativePathFilter(_project_root))
