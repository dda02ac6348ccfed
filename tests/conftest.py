import os
import tempfile

# must be set before linksentry.db / linksentry.api are imported
_DB_DIR = tempfile.mkdtemp(prefix="linksentry-test-")
os.environ.setdefault("LINKSENTRY_DB", os.path.join(_DB_DIR, "scans.db"))
os.environ.setdefault("LINKSENTRY_RATELIMIT", "0")
os.environ.pop("LINKSENTRY_API_KEY", None)
os.environ.pop("REDIS_URL", None)
