"""Test the structural pattern examples."""

import pytest

from pattern_catalog.core.errors import PatternViolation
from pattern_catalog.core.events import failed_assertions
from pattern_catalog.patterns.adapter import (
    AdapterExample,
    Dragon,
    FireDragon,
    RainbowUnicorn,
    UnicornAdapter,
)
from pattern_catalog.patterns.decorator import Accessory, BasicOutfit
from pattern_catalog.patterns.facade import FacadeExample, KingdomFacade
from pattern_catalog.patterns.flyweight import CostumeFactory


class TestAdapter:
    def test_adapter_roars_like_unicorn(self):
        adapted = UnicornAdapter(RainbowUnicorn())
        assert adapted.roar() == "Twinkle Chat!"
        assert isinstance(adapted, Dragon)

    def test_incompatible_adaptee_is_violation(self):
        with pytest.raises(PatternViolation, match="FireDragon"):
            UnicornAdapter(FireDragon())

    def test_example(self):
        events = AdapterExample().run()
        assert [e.payload for e in events[:2]] == ["Blazing Roar!", "Twinkle Chat!"]


class TestDecorator:
    def test_single_accessory(self):
        outfit = Accessory(BasicOutfit(), "a snazzy scarf", 20.0)
        assert outfit.description() == "Basic jeans and tee, accessorized with a snazzy scarf"
        assert outfit.cost() == 70.0

    def test_layers_stack(self):
        outfit = Accessory(Accessory(BasicOutfit(), "a", 1.0), "b", 2.0)
        assert outfit.cost() == 53.0
        assert outfit.description().endswith("accessorized with a, accessorized with b")

    def test_negative_cost_is_violation(self):
        with pytest.raises(PatternViolation, match="negative"):
            Accessory(BasicOutfit(), "a refund", -5.0)


class TestFacade:
    def test_report_has_three_lines(self):
        assert len(KingdomFacade().oversee_kingdom().splitlines()) == 3

    def test_example_emits_one_multiline_print(self):
        events = FacadeExample().run()
        assert events[0].payload.count("\n") == 2
        assert failed_assertions(events) == []


class TestFlyweight:
    def test_same_design_shared(self):
        factory = CostumeFactory()
        assert factory.get_costume("Swan") is factory.get_costume("Swan")
        assert factory.get_costume("Swan") is not factory.get_costume("Rose")
        assert factory.pool_size == 2
