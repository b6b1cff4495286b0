"""An animated sprite walking across a four-by-four sprite sheet."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any

from tilesprite.matrices import Mat4, identity_mat4, scale, translate
from tilesprite.vectors import Vec2, Vec3

SHEET_COLUMNS = 4
SHEET_ROWS = 4
SPRITE_SIZE = 64.0
DEFAULT_SPEED = 100.0

_QUAD_POSITIONS = (
    (0.0, 1.0, 0.0),
    (1.0, 1.0, 0.0),
    (1.0, 0.0, 0.0),
    (0.0, 0.0, 0.0),
)


class Facing(IntEnum):
    """Sprite sheet row used for each walking direction."""

    RIGHT = 0
    LEFT = 1
    UP = 2
    DOWN = 3


@dataclass
class Sprite:
    """A sprite whose frame column animates while it moves."""

    texture: Any
    position: Vec2
    frame_x: int = 0
    frame_y: int = Facing.RIGHT
    max_frames: int = 4
    frame_time: float = 0.15
    timer: float = 0.0
    moving: bool = False
    size: float = field(default=SPRITE_SIZE)

    def update(self, delta_time: float) -> None:
        """Advance the walk animation, or reset it when standing still."""
        if self.moving:
            self.timer += delta_time
            if self.timer >= self.frame_time:
                self.timer = 0.0
                self.frame_x = (self.frame_x + 1) % self.max_frames
        else:
            self.frame_x = 0
            self.timer = 0.0

    def tex_coords(self) -> list[tuple[float, float]]:
        """Texture coordinates of the current frame for the four quad corners."""
        du = 1.0 / SHEET_COLUMNS
        dv = 1.0 / SHEET_ROWS
        u = self.frame_x * du
        v = self.frame_y * dv
        return [(u, v + dv), (u + du, v + dv), (u + du, v), (u, v)]

    def quad_vertices(self) -> list[float]:
        """Interleaved ``x, y, z, u, v`` data for the unit quad of this frame."""
        return [
            component
            for pos, uv in zip(_QUAD_POSITIONS, self.tex_coords())
            for component in (*pos, *uv)
        ]

    def model_matrix(self) -> Mat4:
        """Scale the unit quad to the sprite size, then move it into place."""
        scaled = scale(identity_mat4(), Vec3(self.size, self.size, 1.0))
        return translate(scaled, Vec3.from_vec2(self.position, 0.0))

    def move(
        self,
        left: bool,
        right: bool,
        up: bool,
        down: bool,
        delta_time: float,
        speed: float = DEFAULT_SPEED,
    ) -> None:
        """Apply the held direction keys; the last pressed one sets the facing."""
        step = speed * delta_time
        x, y = self.position.x, self.position.y
        self.moving = False
        if left:
            x -= step
            self.frame_y = Facing.LEFT
            self.moving = True
        if right:
            x += step
            self.frame_y = Facing.RIGHT
            self.moving = True
        if up:
            y += step
            self.frame_y = Facing.UP
            self.moving = True
        if down:
            y -= step
            self.frame_y = Facing.DOWN
            self.moving = True
        self.position = Vec2(x, y)