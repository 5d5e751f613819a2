"""A tree that grows branch by branch, blossoms, then sways and sheds petals."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Optional

from .timer_animation import Color, Point

SAKURA_COLOR = Color(255, 192, 203)

TREE_GROWTH_INTERVAL_MS = 50
SAKURA_GROWTH_INTERVAL_MS = 30
SHAKE_INTERVAL_MS = 20
FALLING_INTERVAL_MS = 30

GROWTH_DURATION_PER_NODE_MS = 50.0
LEAF_DEPTH = 9
BRANCHING_DEPTH = 8
FLOWER_DEPTH = 5
PETALS_PER_BLOSSOM = 5
MAX_TREE_DEPTH = 9.0


class Stage(Enum):
    TREE_GROWING = "tree_growing"
    SAKURA_GROWING = "sakura_growing"
    SHAKING_AND_FALLING = "shaking_and_falling"


@dataclass(eq=False)
class TreeNode:
    """One branch: a segment from ``start`` to ``end`` with up to two children."""

    start: Point = field(default_factory=lambda: Point(0.0, 0.0))
    end: Point = field(default_factory=lambda: Point(0.0, 0.0))
    length: float = 0.0
    angle: float = 0.0
    depth: int = 0
    index: int = -1
    is_leaf: bool = True
    has_sakura: bool = False
    parent: Optional["TreeNode"] = field(default=None, repr=False)
    left: Optional["TreeNode"] = field(default=None, repr=False)
    right: Optional["TreeNode"] = field(default=None, repr=False)


@dataclass
class SakuraPetal:
    relative_pos: Point = field(default_factory=lambda: Point(0.0, 0.0))
    rotation: float = 0.0
    opacity: float = 1.0
    size_factor: float = 0.3


@dataclass
class FallingSakura:
    position: Point = field(default_factory=lambda: Point(0.0, 0.0))
    rotation: float = 0.0
    rotation_speed: float = 0.0
    speed_y: float = 0.0
    opacity: float = 1.0
    petals: list[SakuraPetal] = field(default_factory=list)


@dataclass(frozen=True)
class Branch:
    """A line to draw for one tree node."""

    start: Point
    end: Point
    width: int


def _copy_petals(petals: list[SakuraPetal]) -> list[SakuraPetal]:
    return [replace(p) for p in petals]


class TreeScene:
    """State of the tree animation; the host calls the update methods on its timers.

    The update methods belong to timers that run at the ``*_INTERVAL_MS``
    rates; the petal drop runs after :attr:`drop_delay_ms`, which each drop
    sets anew.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        width: int = 800,
        height: int = 600,
    ) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.width = width
        self.height = height

        self.all_nodes: list[TreeNode] = []
        self.flower_bearing_nodes: list[TreeNode] = []
        self.growing_sakuras: list[list[SakuraPetal]] = []
        self.falling_sakuras: list[FallingSakura] = []

        self.stage = Stage.TREE_GROWING
        self.growth_index = 0
        self.growth_elapsed_ms = 0.0
        self.sakura_growth_index = 0
        self.drop_delay_ms: Optional[int] = None

        self.shake_angle = 0.0
        self.shake_direction = 1.0
        self.max_shake_angle = 2.0
        self.shake_speed = 0.1
        self.falling_speed_factor = 0.5

        start = Point(width / 2, height - 50)
        self.root = TreeNode(start=start, end=start, length=0.0, angle=-90.0, depth=0)
        self.root.index = len(self.all_nodes)
        self.all_nodes.append(self.root)
        self.generate_tree(self.root, 0, start, -90.0)

    def generate_tree(self, node: TreeNode, depth: int, start: Point, angle: float) -> None:
        """Shape ``node`` and grow its subtree; children are numbered in preorder."""
        node.start = start
        node.angle = angle
        node.depth = depth

        factor = self.rng.random() * (1.2 - 0.8) + 0.8
        length = (200.0 / (depth + 1.0)) * factor
        node.length = length
        rad = math.radians(angle)
        node.end = Point(start.x + length * math.cos(rad), start.y + length * math.sin(rad))
        node.is_leaf = depth >= LEAF_DEPTH

        if depth >= FLOWER_DEPTH:
            self.flower_bearing_nodes.append(node)

        if depth < BRANCHING_DEPTH:
            left_angle = angle - 25 - self.rng.randrange(0, 15)
            right_angle = angle + 25 + self.rng.randrange(0, 15)

            node.left = self._new_child(node)
            self.generate_tree(node.left, depth + 1, node.end, left_angle)

            node.right = self._new_child(node)
            self.generate_tree(node.right, depth + 1, node.end, right_angle)

    def _new_child(self, parent: TreeNode) -> TreeNode:
        child = TreeNode(parent=parent, index=len(self.all_nodes))
        self.all_nodes.append(child)
        return child

    def generate_sakura_petals(self) -> list[SakuraPetal]:
        """Five small petals spread evenly around a blossom centre."""
        step = 360.0 / PETALS_PER_BLOSSOM
        return [
            SakuraPetal(Point(0.0, 0.0), i * step, 1.0, 0.3)
            for i in range(PETALS_PER_BLOSSOM)
        ]

    def _begin_shaking(self) -> None:
        self.stage = Stage.SHAKING_AND_FALLING
        self.drop_delay_ms = self.rng.randrange(500, 1500)

    def update_tree_growth(self, elapsed_ms: float) -> None:
        """Advance growth by ``elapsed_ms``; each node takes a fixed time to grow."""
        if self.stage is not Stage.TREE_GROWING:
            return
        if self.growth_index < len(self.all_nodes):
            self.growth_elapsed_ms += elapsed_ms
            if self.growth_elapsed_ms >= GROWTH_DURATION_PER_NODE_MS:
                self.growth_index += 1
                self.growth_elapsed_ms = 0.0
            return

        if self.flower_bearing_nodes:
            self.stage = Stage.SAKURA_GROWING
            self.growing_sakuras.extend(
                self.generate_sakura_petals() for _ in self.flower_bearing_nodes
            )
        else:
            self._begin_shaking()

    def update_sakura_growth(self) -> None:
        """Grow the current blossom's petals; move on once all are full size."""
        if self.stage is not Stage.SAKURA_GROWING:
            return
        if self.sakura_growth_index >= len(self.flower_bearing_nodes):
            self._begin_shaking()
            return

        self.flower_bearing_nodes[self.sakura_growth_index].has_sakura = True
        all_grown = True
        for petal in self.growing_sakuras[self.sakura_growth_index]:
            if petal.size_factor < 1.0:
                petal.size_factor += 0.2
                dx = self.rng.random() - 0.5
                dy = self.rng.random() - 0.5
                petal.relative_pos = Point(
                    petal.relative_pos.x + dx, petal.relative_pos.y + dy
                )
                all_grown = False
        if all_grown:
            self.sakura_growth_index += 1

    def update_tree_shake(self) -> None:
        self.shake_angle += self.shake_direction * self.shake_speed
        if abs(self.shake_angle) >= self.max_shake_angle:
            self.shake_direction *= -1

    def _full_petals(self) -> list[SakuraPetal]:
        petals = self.generate_sakura_petals()
        for petal in petals:
            petal.size_factor = 1.0
        return petals

    def drop_sakura(self) -> FallingSakura:
        """Release a blossom from a random flowering branch and schedule the next."""
        sakura = FallingSakura()
        if self.flower_bearing_nodes:
            index = self.rng.randrange(len(self.flower_bearing_nodes))
            if index < len(self.growing_sakuras):
                sakura.position = self.flower_bearing_nodes[index].end
                sakura.petals = _copy_petals(self.growing_sakuras[index])
            else:
                x = self.rng.randrange(self.width)
                y = self.rng.randrange(self.height // 4)
                sakura.position = Point(x, y)
                sakura.petals = self._full_petals()
        else:
            x = self.rng.randrange(self.width)
            y = self.rng.randrange(self.height // 2)
            sakura.position = Point(x, y)
            sakura.petals = self._full_petals()

        sakura.speed_y = (self.rng.random() * (3.0 - 1.0) + 1.0) * self.falling_speed_factor
        sakura.rotation_speed = self.rng.random() * 10.0 - 5.0
        sakura.opacity = 1.0
        self.falling_sakuras.append(sakura)
        self.drop_delay_ms = self.rng.randrange(300, 1000)
        return sakura

    def update_falling_sakura(self) -> None:
        """Move falling blossoms with a little wind; fade them near the ground."""
        fade_line = self.height * 0.75
        for sakura in self.falling_sakuras:
            y = sakura.position.y + sakura.speed_y
            x = sakura.position.x + (self.rng.random() - 0.5)
            sakura.position = Point(x, y)
            sakura.rotation += sakura.rotation_speed
            if y > fade_line:
                sakura.opacity = max(0.0, sakura.opacity - 0.02)
        self.falling_sakuras = [s for s in self.falling_sakuras if s.opacity > 0]

    def branch_segments(self, elapsed_ms: Optional[float] = None) -> list[Branch]:
        """Lines to draw, in preorder.

        While growing, only nodes up to the current one appear, the current one
        partly grown after ``elapsed_ms`` (by default the time accumulated so far).
        While shaking, each branch is turned about its start in proportion to depth.
        """
        if elapsed_ms is None:
            elapsed_ms = self.growth_elapsed_ms
        branches = []
        for node in self.all_nodes:
            width = max(1, 10 - node.depth)
            if self.stage is Stage.TREE_GROWING:
                if node.index > self.growth_index:
                    continue
                progress = 1.0
                if node.index == self.growth_index:
                    progress = min(1.0, elapsed_ms / GROWTH_DURATION_PER_NODE_MS)
                rad = math.radians(node.angle)
                end = Point(
                    node.start.x + node.length * progress * math.cos(rad),
                    node.start.y + node.length * progress * math.sin(rad),
                )
            elif self.stage is Stage.SHAKING_AND_FALLING:
                turn = math.radians(self.shake_angle * node.depth / MAX_TREE_DEPTH)
                dx = node.end.x - node.start.x
                dy = node.end.y - node.start.y
                end = Point(
                    node.start.x + dx * math.cos(turn) - dy * math.sin(turn),
                    node.start.y + dx * math.sin(turn) + dy * math.cos(turn),
                )
            else:
                end = node.end
            branches.append(Branch(node.start, end, width))
        return branches

    def blossoms(self) -> list[tuple[Point, list[SakuraPetal]]]:
        """Blossoms on the tree: centre and petals of every flowering node that has one."""
        return [
            (node.end, petals)
            for node, petals in zip(self.flower_bearing_nodes, self.growing_sakuras)
            if node.has_sakura
        ]