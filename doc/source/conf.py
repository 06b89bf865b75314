# Configuration file for the Sphinx documentation builder.
# https://www.sphinx-doc.org/en/master/usage/configuration.html
import os
import sys
from datetime import datetime

sys.path.insert(0, os.path.abspath('../../'))

import scatsmooth  # noqa: E402

project = 'scatsmooth'
author = 'Ching-Chuan Chen'
copyright = f'{datetime.now().year}, {author}'
release = scatsmooth.__version__
version = release

extensions = [
    'sphinx.ext.autodoc',
    'sphinx.ext.autosummary',
    'sphinx.ext.intersphinx',
    'sphinx.ext.doctest',
    'sphinx.ext.viewcode',
    'sphinx.ext.mathjax',
    'numpydoc',
    'sphinx_copybutton',
]

exclude_patterns = ['_build']

autosummary_generate = True
add_module_names = False
numpydoc_show_class_members = False
doctest_global_setup = 'import numpy as np'

intersphinx_mapping = {
    'python': ('https://docs.python.org/3/', None),
    'numpy': ('https://numpy.org/doc/stable/', None),
    'scipy': ('https://docs.scipy.org/doc/scipy/', None),
    'sklearn': ('https://scikit-learn.org/stable/', None),
}

html_theme = 'pydata_sphinx_theme'
html_theme_options = {
    'logo': {'text': 'scatsmooth'},
    'show_prev_next': False,
}
