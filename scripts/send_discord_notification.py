#!/usr/bin/env python3
"""Send a Discord build notification from a repository checkout.

Example (Jenkins `sh` step):
    BUILD_RESULT="${currentBuild.currentResult}" \
        python scripts/send_discord_notification.py --text "Build finished"
"""

from __future__ import annotations

import sys
from pathlib import Path

# Allow running this file directly from repository root.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from discord_notify.cli import main  # noqa: E402

if __name__ == "__main__":
    sys.exit(main())
