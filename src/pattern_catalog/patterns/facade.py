"""Facade: one call on the kingdom hides three departments."""

from __future__ import annotations

from pattern_catalog.catalog.base import BaseExample, Console
from pattern_catalog.core.context import ExampleContext
from pattern_catalog.core.enums import Category


class TreasuryDepartment:
    def manage_finances(self) -> str:
        return "Managing the kingdom's treasury."


class DefenseDepartment:
    def protect_realm(self) -> str:
        return "Defending the kingdom from dragons and invaders."


class ScienceDepartment:
    def advance_technology(self) -> str:
        return "Innovating for a brighter tomorrow."


class KingdomFacade:
    def __init__(self) -> None:
        self.treasury = TreasuryDepartment()
        self.defense = DefenseDepartment()
        self.science = ScienceDepartment()

    def oversee_kingdom(self) -> str:
        return "\n".join([
            self.treasury.manage_finances(),
            self.defense.protect_realm(),
            self.science.advance_technology(),
        ])


class FacadeExample(BaseExample):
    name = "Facade"
    category = Category.STRUCTURAL
    summary = "The kingdom facade reports on all departments in one call"

    def demonstrate(self, console: Console, ctx: ExampleContext) -> None:
        report = KingdomFacade().oversee_kingdom()
        console.print(report)
        console.check(
            len(report.splitlines()) == 3, "Report covers all three departments"
        )
