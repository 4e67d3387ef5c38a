"""Sphinx configuration for geodome documentation."""

import os
import sys

project = "geodome"
copyright = "2026, geodome contributors"
author = "geodome contributors"
release = "0.1.0"

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.napoleon",
    "sphinx.ext.intersphinx",
    "sphinx.ext.viewcode",
    "sphinx_autodoc_typehints",
]

exclude_patterns = ["_build", "Thumbs.db", ".DS_Store"]

# -- Docstrings ---------------------------------------------------------------

napoleon_google_docstring = True
napoleon_numpy_docstring = False
napoleon_attr_annotations = True

autodoc_member_order = "bysource"
autodoc_typehints = "description"
autodoc_default_options = {
    "members": True,
    "show-inheritance": True,
}

# Keep the public aliases readable instead of expanding their unions.
autodoc_type_aliases = {
    "Colour": "geodome.model.colour.Colour",
    "CmapSpec": "geodome.model.colour.CmapSpec",
    "Vec3": "geodome.model.geometry.Vec3",
    "VertexKey": "geodome.model.geometry.VertexKey",
    "BaseFace": "geodome.model.geometry.BaseFace",
}

always_document_param_types = True
typehints_defaults = "braces"

intersphinx_mapping = {
    "python": ("https://docs.python.org/3", None),
    "numpy": ("https://numpy.org/doc/stable/", None),
    "matplotlib": ("https://matplotlib.org/stable/", None),
}

# -- HTML ---------------------------------------------------------------------

html_theme = "sphinx_rtd_theme"
html_static_path = ["_static"]
html_theme_options = {
    "navigation_depth": 2,
}

# -- Figures ------------------------------------------------------------------


def _generate_figures(app):
    """Render the dome images referenced by the docs into ``_static``."""
    if os.environ.get("SKIP_IMAGE_GEN"):
        return
    static_dir = os.path.join(os.path.dirname(__file__), "_static")
    sys.path.insert(0, static_dir)
    try:
        from generate_images import generate_docs_images

        generate_docs_images()
    finally:
        sys.path.pop(0)


def setup(app):
    app.connect("builder-inited", _generate_figures)
