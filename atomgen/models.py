import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from atomgen.serializer import generate_xml
from atomgen.utils import gen_id, is_zero_date

log = logging.getLogger("atomgen.models")


@dataclass(frozen=True)
class Author:
    name: str = ""  # requis
    email: Optional[str] = None
    uri: Optional[str] = None


@dataclass(frozen=True)
class Category:
    term: str = ""  # requis
    scheme: Optional[str] = None  # URI du schéma de catégorisation
    label: Optional[str] = None


@dataclass
class Entry:
    title: str = ""
    pub_date: Optional[datetime] = None
    link: str = ""
    description: Optional[str] = None  # HTML, rendu en <summary>
    content: Optional[str] = None  # HTML, rendu en <content>
    # Requis sauf si le Feed a au moins un auteur
    authors: List[Author] = field(default_factory=list)
    categories: List[Category] = field(default_factory=list)

    def add_author(self, author: Author) -> None:
        self.authors.append(author)

    def add_category(self, category: Category) -> None:
        self.categories.append(category)

    def gen_id(self) -> str:
        return gen_id(self)


@dataclass
class Feed:
    """
    An Atom feed. Set title, pub_date and link, add entries with
    add_entry(), then render the document with generate_xml().
    """
    title: str = ""
    pub_date: Optional[datetime] = None
    link: str = ""
    # Requis sauf si toutes les entrées ont au moins un auteur
    authors: List[Author] = field(default_factory=list)
    entries: List[Entry] = field(default_factory=list)

    def add_author(self, author: Author) -> None:
        self.authors.append(author)

    def add_entry(self, entry: Entry) -> None:
        self.entries.append(entry)

    def validate(self) -> List[str]:
        """
        Check the feed against the mandatory fields of RFC 4287.

        Returns every problem found, in rule order; an empty list means the
        feed is valid. The check is not exhaustive.
        """
        errors: List[str] = []

        # Feed: title, updated. L'id vient du lien.
        if not self.title:
            errors.append("Feed must have a Title.")
        if is_zero_date(self.pub_date):
            errors.append("Feed must have a PubDate.")

        # Soit le feed a un auteur, soit chaque entrée en a un.
        if not self.authors:
            for e in self.entries:
                if not e.authors:
                    errors.append(f"Feed has no authors, and entry {e.title} has none either.")
        else:
            for i, author in enumerate(self.authors):
                if not author.name:
                    errors.append(f"Feed author {i} must have a Name.")

        # Entrées: title, updated. L'id est généré.
        for i, e in enumerate(self.entries):
            if not e.title:
                errors.append(f"Entry {i} must have a Title.")
            if is_zero_date(e.pub_date):
                errors.append(f"Entry {i} must have a PubDate.")

        for i, e in enumerate(self.entries):
            for j, category in enumerate(e.categories):
                if not category.term:
                    errors.append(f"Entry {i} category {j} must have a Term.")

        log.debug("Validation: %d problème(s) pour le feed %r.", len(errors), self.title)
        return errors

    def generate_xml(self) -> bytes:
        return generate_xml(self)
