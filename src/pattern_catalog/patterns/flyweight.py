"""Flyweight: dancers share costume objects handed out by a pooling factory."""

from __future__ import annotations

from pattern_catalog.catalog.base import BaseExample, Console
from pattern_catalog.core.context import ExampleContext
from pattern_catalog.core.enums import Category


class Costume:
    """Shared, intrinsic state."""

    def __init__(self, design: str) -> None:
        self.design = design


class CostumeFactory:
    def __init__(self) -> None:
        self._costumes: dict[str, Costume] = {}

    def get_costume(self, design: str) -> Costume:
        costume = self._costumes.get(design)
        if costume is None:
            costume = Costume(design)
            self._costumes[design] = costume
        return costume

    @property
    def pool_size(self) -> int:
        return len(self._costumes)


class Dancer:
    """Extrinsic state (the name) plus a reference to a shared costume."""

    def __init__(self, name: str, costume: Costume) -> None:
        self.name = name
        self.costume = costume


_CAST = (
    ("Odette", "Swan"),
    ("Odile", "Swan"),
    ("Clara", "Snowflake"),
    ("Marie", "Snowflake"),
    ("Aurora", "Rose"),
)


class FlyweightExample(BaseExample):
    name = "Flyweight"
    category = Category.STRUCTURAL
    summary = "Five dancers share three pooled costumes"

    def demonstrate(self, console: Console, ctx: ExampleContext) -> None:
        factory = CostumeFactory()
        dancers = [Dancer(name, factory.get_costume(design)) for name, design in _CAST]

        for dancer in dancers:
            console.print(f"{dancer.name} dances in the {dancer.costume.design} costume")
        console.print(f"{len(dancers)} dancers share {factory.pool_size} costumes")

        console.check(
            dancers[0].costume is dancers[1].costume,
            "Odette and Odile share one Swan costume",
        )
