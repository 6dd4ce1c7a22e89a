import os
import sys

repo_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if repo_root not in sys.path:
    sys.path.insert(0, repo_root)

# Qt widgets tests run without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
