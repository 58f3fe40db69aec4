"""Sphinx configuration for cld2xref documentation."""

import cld2xref

project = "cld2xref"
copyright = "2026, cld2xref contributors"
author = "cld2xref contributors"
release = cld2xref.__version__
version = ".".join(release.split(".")[:2])

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.intersphinx",
    "sphinx_copybutton",
]

exclude_patterns = ["_build"]

html_theme = "furo"

intersphinx_mapping = {
    "python": ("https://docs.python.org/3", None),
    "langcodes": ("https://langcodes.readthedocs.io/en/latest", None),
}

autodoc_member_order = "bysource"
autodoc_typehints = "description"
