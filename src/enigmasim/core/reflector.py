from __future__ import annotations

from .alphabet import ALPHABET, check_ordering, index_of
from .errors import InvalidWiring


class Reflector:
    def __init__(self, name: str, ordering: str) -> None:
        check_ordering(ordering)

        # ensure involution property (w[i] = j => w[j] = i) and no self-maps
        for i, c in enumerate(ordering):
            j = index_of(c)
            if ordering[j] != ALPHABET[i] or i == j:
                raise InvalidWiring(
                    f"Reflector {name!r} wiring must be an involution with no fixed points"
                )

        self.name = name
        self.ordering = ordering

    def reflect(self, letter: str) -> str:
        return self.ordering[index_of(letter)]

    def __repr__(self) -> str:
        return f"<Reflector {self.name}>"
