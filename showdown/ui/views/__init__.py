"""Page renderers for Place Value Showdown."""

from showdown.ui.views.match import render_match_page
from showdown.ui.views.results import render_results_page
from showdown.ui.views.setup import render_setup_page

__all__ = ["render_match_page", "render_results_page", "render_setup_page"]
