import os
import tempfile
from pathlib import Path

# Must run before boundary_search is imported: loggers are created at import time.
_log_dir = Path(tempfile.mkdtemp(prefix="boundary_search_logs_"))
os.environ.setdefault("BOUNDARY_SEARCH_LOG_DIR", str(_log_dir))
os.environ.setdefault("BOUNDARY_SEARCH_CONFIG", str(_log_dir / "missing.json"))
