from __future__ import annotations

OK = 0
ERR_ORPHANS = 1
ERR_CONFIG = 3
ERR_IO = 4
ERR_INTERNAL = 99
