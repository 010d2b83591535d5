"""Prototype: new objects are made by copying an existing one.

The pages example keeps the owner relation non-owning: a ``Page`` stores
its author's id, and the ``AuthorTable`` resolves it. Cloning a page
registers the copy with the same author and starts it without comments.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from pattern_catalog.catalog.base import BaseExample, Console
from pattern_catalog.core.context import ExampleContext
from pattern_catalog.core.enums import Category
from pattern_catalog.core.errors import PatternViolation
from pattern_catalog.core.ids import IIdSource


# ---------------------------------------------------------------------------
# Superheroes
# ---------------------------------------------------------------------------

class CodeMan:
    def __init__(self, name: str, super_power: str) -> None:
        self.name = name
        self.super_power = super_power

    def clone(self) -> CodeMan:
        return CodeMan(name=self.name, super_power=self.super_power)


class PrototypeExample(BaseExample):
    name = "Prototype"
    category = Category.CREATIONAL
    summary = "A superhero is cloned and the copy renamed independently"

    def demonstrate(self, console: Console, ctx: ExampleContext) -> None:
        original = CodeMan(name="CodeMan", super_power="Codes in the blink of an eye!")
        cloned = original.clone()
        console.print(cloned.name)
        console.print(cloned.super_power)

        cloned.name = "CodeWoman"
        console.check(cloned is not original, "Clone is a distinct object")
        console.check(
            original.name == "CodeMan",
            "Renaming the clone leaves the original untouched",
        )


# ---------------------------------------------------------------------------
# Pages with an owner table
# ---------------------------------------------------------------------------

@dataclass
class Author:
    author_id: str
    name: str
    page_ids: list[str] = field(default_factory=list)

    @property
    def page_count(self) -> int:
        return len(self.page_ids)


class AuthorTable:
    """Owns every author; pages refer to authors by id only."""

    def __init__(self) -> None:
        self._authors: dict[str, Author] = {}

    def add(self, author: Author) -> None:
        self._authors[author.author_id] = author

    def get(self, author_id: str) -> Author:
        try:
            return self._authors[author_id]
        except KeyError:
            raise PatternViolation(f"Page refers to unknown author {author_id}") from None


@dataclass
class Page:
    page_id: str
    title: str
    contents: str
    author_id: str
    comments: list[str] = field(default_factory=list)

    @classmethod
    def create(
        cls, authors: AuthorTable, ids: IIdSource, title: str, contents: str, author_id: str
    ) -> Page:
        page = cls(page_id=ids.new_id(), title=title, contents=contents, author_id=author_id)
        authors.get(author_id).page_ids.append(page.page_id)
        return page

    def add_comment(self, comment: str) -> None:
        self.comments.append(comment)

    def clone(self, authors: AuthorTable, ids: IIdSource) -> Page:
        """Copy title and contents, keep the author, drop the comments."""
        return Page.create(
            authors,
            ids,
            title=f"Copy of {self.title}",
            contents=self.contents,
            author_id=self.author_id,
        )


class PagePrototypeExample(BaseExample):
    name = "Prototype (pages)"
    category = Category.CREATIONAL
    summary = "Cloned pages join their author's page list without comments"

    def __init__(self, clones: int = 2) -> None:
        self._clones = clones

    def demonstrate(self, console: Console, ctx: ExampleContext) -> None:
        authors = AuthorTable()
        author = Author(author_id=ctx.ids.new_id(), name="John Smith")
        authors.add(author)

        page = Page.create(
            authors,
            ctx.ids,
            title="My First Page",
            contents="My First Contents",
            author_id=author.author_id,
        )
        page.add_comment("Comment #1")
        console.print(f"Original page: {page.title}, {len(page.comments)} comment(s)")

        for _ in range(self._clones):
            before = author.page_count
            clone = page.clone(authors, ctx.ids)
            console.print(f"Cloned page: {clone.title}, {len(clone.comments)} comment(s)")
            console.check(
                author.page_count == before + 1,
                "Cloning adds exactly one page to the author",
            )
            console.check(not clone.comments, "Clone starts without comments")

        console.print(f"{author.name} now owns {author.page_count} pages")
