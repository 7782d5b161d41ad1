"""Parser turning command-line relation tokens into Relation records.

A token is a comma-separated group of vertex names. The first name
precedes every other name in the group:

    "a,b"     -> a precedes b
    "x,y,z"   -> x precedes y, x precedes z
"""

from collections.abc import Iterable

from tsrt.graph.relation import Relation

SEPARATOR = ","
MIN_NAMES = 2


class RelationParseError(ValueError):
    """Raised when a token does not describe at least one relation.

    Attributes:
        token: The offending token as it was supplied
    """

    def __init__(self, token: str, reason: str):
        super().__init__(f"Bad relation {token!r}: {reason}")
        self.token = token


class RelationParser:
    """Parser for comma-separated relation tokens."""

    def __init__(self, separator: str = SEPARATOR):
        """Initialize the parser.

        Args:
            separator: Character separating vertex names inside a token
        """
        self.separator = separator

    def parse_token(self, token: str) -> list[Relation[str]]:
        """Parse one token into its relations.

        Args:
            token: Token such as "x,y,z"

        Returns:
            One relation per name after the first, in token order

        Raises:
            RelationParseError: If the token has fewer than two names or an empty name

        Examples:
            >>> RelationParser().parse_token("x,y,z")
            [Relation(source='x', target='y'), Relation(source='x', target='z')]
        """
        names = [name.strip() for name in token.split(self.separator)]

        if len(names) < MIN_NAMES:
            raise RelationParseError(token, f"expected at least {MIN_NAMES} names")
        if not all(names):
            raise RelationParseError(token, "empty vertex name")

        head, *tails = names
        return [Relation(head, tail) for tail in tails]

    def parse(self, tokens: Iterable[str]) -> list[Relation[str]]:
        """Parse every token, preserving order.

        Duplicate relations are kept; the graph collapses them.

        Raises:
            RelationParseError: On the first malformed token
        """
        relations: list[Relation[str]] = []
        for token in tokens:
            relations.extend(self.parse_token(token))

        return relations
