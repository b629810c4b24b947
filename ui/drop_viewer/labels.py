import re
from typing import Dict, List


SORT_LABELS: Dict[str, str] = {
    "name": "Name",
    "type": "Type",
    "probability": "Drop rate",
}
SORT_OPTIONS: List[str] = list(SORT_LABELS.keys())

ALL_CATEGORIES_LABEL = "All"

EMPTY_STATE = "No equipment matches the current search or filter."

LOAD_FAILED_TITLE = "❌ Data load failed"

FILE_SOURCE_REASON = (
    "**Cause:** the data file could not be read from the local file system. "
    "The viewer expects `{filename}` next to the app or under `data/`."
)

FILE_SOURCE_STEPS = """\
**Fix (pick one):**

1. **Put the file in place:** copy `{filename}` into the `data/` directory and reload.
2. **Serve it over HTTP:** in the directory holding the file run
   `python3 -m http.server 8000`, then set
   `DROP_VIEWER_DATA_SOURCE=http://localhost:8000/{filename}` and restart the app.
3. **Point at another path:** set `DROP_VIEWER_DATA_SOURCE` to the file's full path.
"""

SERVED_SOURCE_CHECKLIST = """\
Please check:

- that `{filename}` exists on the server
- that the URL is correct: `{source}`
- the app log for the full error
"""

_MD_SPECIAL = re.compile(r"([\\`*_{}\[\]()#+\-.!|<>~$])")


def md_escape(text: str) -> str:
    return _MD_SPECIAL.sub(r"\\\1", str(text))


def sort_label(key: str) -> str:
    return SORT_LABELS.get(key, key)


def category_label(category: str) -> str:
    return category or ALL_CATEGORIES_LABEL


def page_info(current_page: int, total_pages: int) -> str:
    return f"Page {current_page} / {total_pages}"
