"""
backdrop.py: Decorative 3D sky plane and cloud clusters behind the gameplay.

The scene is static, so it is projected once through a pinhole camera into a
translucent layer and that layer is blitted every frame.
"""

import logging
import math
import random
from dataclasses import dataclass
from typing import List, Optional, Tuple

import pygame

logger = logging.getLogger(__name__)

CAMERA_FOV = 75.0               # Vertical field of view (degrees)
CAMERA_Z = 5.0

SKY_PLANE_SIZE = (20.0, 15.0)
SKY_PLANE_Z = -1.0
SKY_PLANE_COLOR = (0x87, 0xCE, 0xEB)
SKY_PLANE_ALPHA = 76            # 30% opacity

CLOUD_COUNT = 5
CLOUD_Z = -0.5
CLOUD_COLOR = (255, 255, 255)
CLOUD_ALPHA = 153               # 60% opacity
CLOUD_PUFF_RADIUS = 0.3
# Puff offsets relative to the cluster center, in units of cluster scale
CLOUD_PUFFS = [(0.0, 0.0), (0.4, 0.1), (-0.4, 0.1), (0.2, -0.2), (-0.2, -0.2)]


@dataclass
class CloudCluster:
    x: float
    y: float
    scale: float


class Backdrop:
    """Cosmetic layer. Any pygame failure turns it off instead of stopping the game."""

    def __init__(self, size: Tuple[int, int], rng: Optional[random.Random] = None):
        self.width, self.height = size
        self.rng = rng or random.Random()
        self.clusters: List[CloudCluster] = [self._random_cluster() for _ in range(CLOUD_COUNT)]
        self.layer: Optional[pygame.Surface] = None
        try:
            self.layer = self._build_layer()
        except pygame.error as e:
            logger.warning("3D backdrop not available: %s", e)

    @property
    def enabled(self) -> bool:
        return self.layer is not None

    def _random_cluster(self) -> CloudCluster:
        return CloudCluster(
            x=self.rng.random() * 15 - 7.5,
            y=self.rng.random() * 8 - 4,
            scale=self.rng.random() * 0.5 + 0.2,
        )

    # ----------------- Projection -----------------

    def units_per_pixel(self, z: float) -> float:
        """World units covered by one screen pixel at depth z."""
        half_height = (CAMERA_Z - z) * math.tan(math.radians(CAMERA_FOV / 2))
        return half_height / (self.height / 2)

    def project(self, x: float, y: float, z: float) -> Tuple[float, float]:
        """World point to screen pixel; world y points up, screen y points down."""
        upp = self.units_per_pixel(z)
        return self.width / 2 + x / upp, self.height / 2 - y / upp

    # ----------------- Drawing -----------------

    def _build_layer(self) -> pygame.Surface:
        layer = pygame.Surface((self.width, self.height), pygame.SRCALPHA)

        plane_w, plane_h = SKY_PLANE_SIZE
        left, top = self.project(-plane_w / 2, plane_h / 2, SKY_PLANE_Z)
        upp = self.units_per_pixel(SKY_PLANE_Z)
        plane = pygame.Rect(int(left), int(top), int(plane_w / upp), int(plane_h / upp))
        layer.fill((*SKY_PLANE_COLOR, SKY_PLANE_ALPHA), plane.clip(layer.get_rect()))

        for cluster in self.clusters:
            self._draw_cluster(layer, cluster)
        return layer

    def _draw_cluster(self, layer: pygame.Surface, cluster: CloudCluster):
        upp = self.units_per_pixel(CLOUD_Z)
        radius = max(1, round(CLOUD_PUFF_RADIUS * cluster.scale / upp))
        puff = pygame.Surface((radius * 2, radius * 2), pygame.SRCALPHA)
        pygame.draw.circle(puff, (*CLOUD_COLOR, CLOUD_ALPHA), (radius, radius), radius)

        # Each puff is blended separately so overlaps look denser
        for dx, dy in CLOUD_PUFFS:
            sx, sy = self.project(cluster.x + dx * cluster.scale, cluster.y + dy * cluster.scale, CLOUD_Z)
            layer.blit(puff, (round(sx) - radius, round(sy) - radius))

    def draw(self, surface: pygame.Surface):
        if self.layer is None:
            return
        try:
            surface.blit(self.layer, (0, 0))
        except pygame.error as e:
            logger.warning("Disabling 3D backdrop: %s", e)
            self.layer = None
