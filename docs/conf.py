# Configuration file for the Sphinx documentation builder.
#
# For the full list of built-in configuration values, see the documentation:
# https://www.sphinx-doc.org/en/master/usage/configuration.html

import sys
from pathlib import Path

# Let autodoc import the package without installing it
sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src"))

# -- Project information -----------------------------------------------------

project = 'measurium'
copyright = '2025, Measurium contributors'
author = 'Measurium contributors'
html_title = 'Measurium Docs'

# -- General configuration ---------------------------------------------------

extensions = [
    'sphinx.ext.autodoc',
    'sphinx.ext.napoleon',
    'sphinx.ext.viewcode',
    'sphinx_copybutton',
    "myst_parser"
]

autodoc_member_order = "bysource"
napoleon_numpy_docstring = True
napoleon_google_docstring = False

templates_path = ['_templates']
exclude_patterns = ['_build', 'Thumbs.db', '.DS_Store']


# -- Options for HTML output -------------------------------------------------

html_theme = "furo"

html_theme_options = {
    "sidebar_hide_name": False,
    "navigation_with_keys": True,
    "top_of_page_buttons": ["view"],

    "light_css_variables": {
        "color-brand-primary": "#2f7d5b",
        "color-brand-content": "#1d4f3a",
    },
    "dark_css_variables": {
        "color-brand-primary": "#6fcf97",
        "color-brand-content": "#b7e4c7",
    },
}

source_suffix = {
    ".rst": "restructuredtext",
    ".md": "markdown",
}
