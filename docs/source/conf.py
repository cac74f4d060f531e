import os
import sys

sys.path.insert(0, os.path.abspath("../../src"))

import siteurl  # noqa: E402

project = "siteurl"
author = "siteurl contributors"
release = siteurl.__version__

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.napoleon",
    "myst_parser",
]

exclude_patterns = []

# index.md embeds the API reference in an eval-rst block
myst_heading_anchors = 2

autodoc_member_order = "bysource"
autodoc_default_options = {
    "show-inheritance": True,
}

html_theme = "furo"
html_title = "siteurl"
