# Sphinx configuration of the protokit documentation.

import os
import sys

# document the package from the source tree, not from an installed copy
sys.path.insert(0, os.path.abspath("../../"))

project = "protokit"
author = "protokit developers"

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.napoleon",
    "sphinx_automodapi.automodapi",
    "sphinx_copybutton",
    "myst_parser",
]

# docstrings use numpy style "Parameters" sections
napoleon_numpy_docstring = True
napoleon_google_docstring = False

# inheritance diagrams would require graphviz
automodapi_inheritance_diagram = False
autodoc_default_options = {"undoc-members": False}

templates_path = ["_templates"]
exclude_patterns = []

html_theme = "sphinx_book_theme"
html_title = "protokit"
html_theme_options = {
    "use_download_button": False,
    "use_fullscreen_button": False,
    "logo": {
        "text": "<span style='font-size: 2em;'>protokit</span>",
    },
}
html_context = {
    "default_mode": "dark",
}
