from __future__ import annotations

from typing import Dict, Tuple

from pyglet.gl import (
    GL_COMPILE,
    GL_LINES,
    GL_QUADS,
    glBegin,
    glCallList,
    glColor4f,
    glEnd,
    glEndList,
    glGenLists,
    glNewList,
    glVertex3f,
)

Color = Tuple[float, float, float, float]

_LAST_COLOR = (None, None, None, None)
_GRID_CACHE: Dict[tuple, int] = {}
_AXES_CACHE: Dict[tuple, int] = {}

def _set_color(rgba: Color):
    global _LAST_COLOR
    r, g, b, a = rgba
    if _LAST_COLOR != (r, g, b, a):
        glColor4f(float(r), float(g), float(b), float(a))
        _LAST_COLOR = (r, g, b, a)

def _reset_color_cache():
    # display lists and direct glColor calls bypass the cache
    global _LAST_COLOR
    _LAST_COLOR = (None, None, None, None)

def _grid_lines(half: float, y: float, step: float):
    n = int(half / step + 1e-6)
    for i in range(-n, n + 1):
        c = float(i) * step
        glVertex3f(c, y, -half)
        glVertex3f(c, y, half)
        glVertex3f(-half, y, c)
        glVertex3f(half, y, c)

def draw_grid(
    half_extent: float,
    y: float,
    step: float = 1.0,
    rgba: Color = (0.15, 0.15, 0.18, 1.0),
):
    """Square grid on the horizontal plane at height ``y``, centred on the origin."""
    half = float(half_extent)
    yy = float(y)
    st = max(1e-3, float(step))
    r, g, b, a = map(float, rgba)

    key = (half, yy, st, r, g, b, a)
    dl = _GRID_CACHE.get(key, 0)

    if not dl:
        dl = int(glGenLists(1))
        if dl:
            glNewList(dl, GL_COMPILE)
            glColor4f(r, g, b, a)
            glBegin(GL_LINES)
            _grid_lines(half, yy, st)
            glEnd()
            glEndList()
            _GRID_CACHE[key] = dl

    _reset_color_cache()
    if dl:
        glCallList(dl)
        return

    _set_color((r, g, b, a))
    glBegin(GL_LINES)
    _grid_lines(half, yy, st)
    glEnd()

def draw_axes(origin: Tuple[float, float, float], scale: float = 1.0):
    ox, oy, oz = map(float, origin)
    sc = float(scale)

    key = (ox, oy, oz, sc)
    dl = _AXES_CACHE.get(key, 0)

    if not dl:
        dl = int(glGenLists(1))
        if dl:
            glNewList(dl, GL_COMPILE)
            _axes_lines(ox, oy, oz, sc)
            glEndList()
            _AXES_CACHE[key] = dl

    _reset_color_cache()
    if dl:
        glCallList(dl)
        return
    _axes_lines(ox, oy, oz, sc)

def _axes_lines(ox: float, oy: float, oz: float, sc: float):
    glBegin(GL_LINES)
    glColor4f(1.0, 0.2, 0.2, 1.0)
    glVertex3f(ox, oy, oz)
    glVertex3f(ox + sc, oy, oz)
    glColor4f(0.2, 1.0, 0.2, 1.0)
    glVertex3f(ox, oy, oz)
    glVertex3f(ox, oy + sc, oz)
    glColor4f(0.2, 0.6, 1.0, 1.0)
    glVertex3f(ox, oy, oz)
    glVertex3f(ox, oy, oz + sc)
    glEnd()

def draw_marker(center: Tuple[float, float, float], size: float, rgba: Color):
    """Three-axis cross, used for the orbit pivot."""
    cx, cy, cz = map(float, center)
    h = float(size) * 0.5
    _set_color(rgba)
    glBegin(GL_LINES)
    glVertex3f(cx - h, cy, cz)
    glVertex3f(cx + h, cy, cz)
    glVertex3f(cx, cy - h, cz)
    glVertex3f(cx, cy + h, cz)
    glVertex3f(cx, cy, cz - h)
    glVertex3f(cx, cy, cz + h)
    glEnd()

def draw_plane(half_extent: float, y: float, rgba: Color):
    """Translucent horizontal quad at height ``y``."""
    half = float(half_extent)
    yy = float(y)
    _set_color(rgba)
    glBegin(GL_QUADS)
    glVertex3f(-half, yy, -half)
    glVertex3f(-half, yy, half)
    glVertex3f(half, yy, half)
    glVertex3f(half, yy, -half)
    glEnd()
