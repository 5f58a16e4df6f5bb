"""Mine theme for Dig & Bust."""

from digbust.ui.themes.animations import (
    load_css,
    render_bust_animation,
    render_gem_popup,
    render_jackpot_animation,
    render_progress_bar,
)

__all__ = [
    "load_css",
    "render_bust_animation",
    "render_gem_popup",
    "render_jackpot_animation",
    "render_progress_bar",
]
