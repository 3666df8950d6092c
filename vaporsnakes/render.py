# vaporsnakes/render.py
"""
Render commands and the pygame renderer that executes them.

Entities describe what they look like as plain command objects; only the
Renderer touches a pygame surface. Two identical command lists always produce
identical pixels.
"""
import math
from dataclasses import dataclass
from typing import Tuple, Union

import numpy as np
import pygame

Color = Tuple[int, int, int]
Point = Tuple[float, float]


def hsl_color(hue, saturation=100, lightness=70):
    """Converts an HSL triple (hue in degrees, the rest in percent) to RGB."""
    color = pygame.Color(0, 0, 0)
    color.hsla = (hue % 360, saturation, lightness, 100)
    return (color.r, color.g, color.b)


@dataclass(frozen=True)
class Fill:
    color: Color


@dataclass(frozen=True)
class Grid:
    spacing: int
    color: Tuple[int, int, int, int]
    width: int = 1


@dataclass(frozen=True)
class GlowCircle:
    center: Point
    radius: float
    color: Color
    alpha: float = 1.0
    glow: float = 0.0


@dataclass(frozen=True)
class GlowStroke:
    points: Tuple[Point, ...]
    width: int
    color: Color
    glow: float = 0.0


@dataclass(frozen=True)
class GlowRing:
    center: Point
    radius: float
    width: int
    color: Color
    glow: float = 0.0


@dataclass(frozen=True)
class RadialGradient:
    center: Point
    radius: float
    inner: Tuple[int, int, int, int]
    outer: Tuple[int, int, int, int]


RenderCommand = Union[Fill, Grid, GlowCircle, GlowStroke, GlowRing, RadialGradient]


def radial_alpha(size, radius):
    """Returns a (size, size) array of falloff factors, 1 at the centre and 0 at radius."""
    half = size / 2
    offsets = np.arange(size) + 0.5 - half
    dist = np.sqrt(offsets[:, None] ** 2 + offsets[None, :] ** 2)
    return np.clip(1.0 - dist / max(radius, 1e-6), 0.0, 1.0)


class Renderer:
    """Draws render commands onto a pygame surface."""

    GLOW_STRENGTH = 0.45 # Peak opacity of a glow halo relative to its body
    SPRITE_CACHE_LIMIT = 512

    def __init__(self):
        self._grid_cache = {}
        self._sprite_cache = {}
        self._body_cache = {}

    def draw(self, surface, commands):
        for command in commands:
            if isinstance(command, Fill):
                surface.fill(command.color)
            elif isinstance(command, Grid):
                surface.blit(self._grid_surface(surface.get_size(), command), (0, 0))
            elif isinstance(command, GlowCircle):
                self._draw_circle(surface, command)
            elif isinstance(command, GlowStroke):
                self._draw_stroke(surface, command)
            elif isinstance(command, GlowRing):
                self._draw_ring(surface, command)
            elif isinstance(command, RadialGradient):
                self._draw_gradient(surface, command)
            else:
                raise TypeError(f"Unknown render command: {command!r}")

    def _grid_surface(self, size, grid):
        key = (size, grid)
        if key not in self._grid_cache:
            # Only the current window size is worth keeping.
            self._grid_cache.clear()
            width, height = size
            grid_surf = pygame.Surface(size, pygame.SRCALPHA)
            for x in range(0, width + 1, grid.spacing):
                pygame.draw.line(grid_surf, grid.color, (x, 0), (x, height), grid.width)
            for y in range(0, height + 1, grid.spacing):
                pygame.draw.line(grid_surf, grid.color, (0, y), (width, y), grid.width)
            self._grid_cache[key] = grid_surf
        return self._grid_cache[key]

    def _sprite(self, radius, rgba_inner, rgba_outer):
        """Builds (and caches) a radial sprite fading from inner to outer colour."""
        radius = max(1, int(math.ceil(radius)))
        key = (radius, rgba_inner, rgba_outer)
        sprite = self._sprite_cache.get(key)
        if sprite is None:
            size = radius * 2
            sprite = pygame.Surface((size, size), pygame.SRCALPHA)
            t = radial_alpha(size, radius)
            inside = t > 0
            inner = np.array(rgba_inner, dtype=np.float64)
            outer = np.array(rgba_outer, dtype=np.float64)
            # t == 1 at the centre, so blend outer -> inner as t grows.
            mixed = outer[None, None, :] + (inner - outer)[None, None, :] * t[:, :, None]
            rgb = pygame.surfarray.pixels3d(sprite)
            rgb[:] = mixed[:, :, :3].astype(np.uint8)
            del rgb
            alpha = pygame.surfarray.pixels_alpha(sprite)
            alpha[:] = np.where(inside, mixed[:, :, 3], 0).astype(np.uint8)
            del alpha
            if len(self._sprite_cache) >= self.SPRITE_CACHE_LIMIT:
                self._sprite_cache.clear()
            self._sprite_cache[key] = sprite
        return sprite

    def _blit_centered(self, surface, sprite, center):
        w, h = sprite.get_size()
        surface.blit(sprite, (int(center[0] - w / 2), int(center[1] - h / 2)))

    def _draw_halo(self, surface, center, radius, color, alpha):
        peak = int(255 * self.GLOW_STRENGTH * alpha)
        if peak <= 0 or radius < 1:
            return
        halo = self._sprite(radius, (*color, peak), (*color, 0))
        self._blit_centered(surface, halo, center)

    def _body(self, radius, color, alpha):
        """Builds (and caches) a solid circle sprite."""
        key = (radius, color, alpha)
        body = self._body_cache.get(key)
        if body is None:
            body = pygame.Surface((radius * 2, radius * 2), pygame.SRCALPHA)
            pygame.draw.circle(body, (*color, alpha), (radius, radius), radius)
            if len(self._body_cache) >= self.SPRITE_CACHE_LIMIT:
                self._body_cache.clear()
            self._body_cache[key] = body
        return body

    def _draw_circle(self, surface, circle):
        if circle.radius <= 0 or circle.alpha <= 0:
            return
        if circle.glow > 0:
            self._draw_halo(surface, circle.center, circle.radius + circle.glow, circle.color, circle.alpha)
        radius = max(1, int(round(circle.radius)))
        alpha = int(255 * min(1.0, circle.alpha))
        self._blit_centered(surface, self._body(radius, circle.color, alpha), circle.center)

    def _draw_stroke(self, surface, stroke):
        points = [(int(x), int(y)) for x, y in stroke.points]
        if len(points) < 2:
            return
        if stroke.glow > 0:
            glow_width = int(stroke.width + stroke.glow)
            bounds = pygame.Rect(points[0], (0, 0)).unionall([pygame.Rect(p, (1, 1)) for p in points])
            bounds.inflate_ip(glow_width * 2, glow_width * 2)
            glow_surf = pygame.Surface(bounds.size, pygame.SRCALPHA)
            local = [(x - bounds.x, y - bounds.y) for x, y in points]
            glow_color = (*stroke.color, int(255 * self.GLOW_STRENGTH / 2))
            pygame.draw.lines(glow_surf, glow_color, False, local, glow_width)
            surface.blit(glow_surf, bounds.topleft)
        pygame.draw.lines(surface, stroke.color, False, points, stroke.width)
        # Round caps
        for end in (points[0], points[-1]):
            pygame.draw.circle(surface, stroke.color, end, stroke.width // 2)

    def _draw_ring(self, surface, ring):
        if ring.radius <= 0:
            return
        center = (int(ring.center[0]), int(ring.center[1]))
        if ring.glow > 0:
            outer = int(ring.radius + ring.glow / 2)
            glow_surf = pygame.Surface((outer * 2, outer * 2), pygame.SRCALPHA)
            glow_color = (*ring.color, int(255 * self.GLOW_STRENGTH / 2))
            pygame.draw.circle(glow_surf, glow_color, (outer, outer), outer, int(ring.width + ring.glow))
            surface.blit(glow_surf, (center[0] - outer, center[1] - outer))
        pygame.draw.circle(surface, ring.color, center, int(ring.radius), ring.width)

    def _draw_gradient(self, surface, gradient):
        if gradient.radius < 1:
            return
        sprite = self._sprite(gradient.radius, gradient.inner, gradient.outer)
        self._blit_centered(surface, sprite, gradient.center)
