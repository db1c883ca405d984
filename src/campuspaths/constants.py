from os import getenv
from pathlib import Path

CHECK_INVARIANTS = getenv("CAMPUSPATHS_CHECK_INVARIANTS", "").lower() in {
    "1",
    "true",
    "yes",
}
DATA_DIR = Path(getenv("CAMPUSPATHS_DATA_DIR", Path.cwd() / "data"))
