import datetime as dt
from typing import List, Optional, Union
from pydantic import BaseModel, ConfigDict


class Author(BaseModel):
    """Structured author entry."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    name: Optional[str] = None
    affiliations: Optional[Union[List[str], str]] = None

    def affiliation_list(self) -> List[str]:
        if self.affiliations is None:
            return []
        if isinstance(self.affiliations, list):
            return list(self.affiliations)
        return [self.affiliations]


# A plain name or a structured record
AuthorEntry = Union[str, Author]


class Frontmatter(BaseModel):
    """Recognized fields of a leading YAML block."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    title: Optional[str] = None
    thumbnail: Optional[str] = None
    date: Optional[Union[dt.datetime, dt.date, str]] = None
    authors: Optional[Union[List[AuthorEntry], AuthorEntry]] = None

    def author_list(self) -> List[AuthorEntry]:
        """Authors as an ordered list, whatever shape the YAML used."""
        if self.authors is None:
            return []
        if isinstance(self.authors, list):
            return list(self.authors)
        return [self.authors]
