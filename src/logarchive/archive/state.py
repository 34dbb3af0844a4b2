from __future__ import annotations

import threading

# One lock for every ArchiveHooks instance in the process. Reentrant so the
# pruner can take it again while the controller already holds it.
ARCHIVE_LOCK = threading.RLock()
