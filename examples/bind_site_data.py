"""Parse a page and bind its model to a directory of data files.

Run from the repository root::

    python examples/bind_site_data.py tests/fixtures/pages/team.html tests/fixtures/data
"""

import logging
import sys
from pathlib import Path

from solidify_pages import load_data_directory, load_page, validate_page

logging.basicConfig(level=logging.DEBUG)

page_path, data_dir = Path(sys.argv[1]), Path(sys.argv[2])

page = load_page(page_path)
for problem in validate_page(page):
    print(f"warning: {problem}")

print(f"{page.title} -> {page.url} ({page.template_id})")
print(page.resolve(load_data_directory(data_dir)).to_dict())
