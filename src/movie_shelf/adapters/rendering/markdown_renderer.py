"""Markdown list renderer."""

from collections.abc import Sequence
from dataclasses import dataclass

from movie_shelf.core import (
    ActionDescriptor,
    ActionStrategy,
    ListRenderer,
    MovieItem,
    resolve_actions,
)
from movie_shelf.core.entities import kind_name


@dataclass
class RenderedCard:
    """Card for one movie as produced by a render pass."""

    item: MovieItem
    is_favourite: bool
    actions: list[ActionDescriptor]


class MarkdownListRenderer(ListRenderer):
    """Render movie cards as markdown.

    The renderer knows nothing about what the actions do; it prints the
    labels the page's strategy hands it.
    """

    def __init__(self, heading: str = "Movies", overview_length: int = 150) -> None:
        self.heading = heading
        self.overview_length = overview_length

    def build_cards(
        self,
        items: Sequence[MovieItem],
        favourites: frozenset[int],
        strategy: ActionStrategy,
    ) -> list[RenderedCard]:
        return [
            RenderedCard(item=item, is_favourite=item.id in favourites, actions=actions)
            for item, actions in resolve_actions(strategy, items)
        ]

    def render(
        self,
        items: Sequence[MovieItem],
        favourites: frozenset[int],
        strategy: ActionStrategy,
    ) -> str:
        """Render markdown for the filtered items."""
        if not items:
            return f"# {self.heading}\n\nNo movies to display."

        lines = [
            f"# {self.heading}",
            "",
            f"Movies shown: {len(items)}",
            "",
        ]

        for card in self.build_cards(items, favourites, strategy):
            lines.extend(self._format_card(card))

        return "\n".join(lines)

    def _format_card(self, card: RenderedCard) -> list[str]:
        """Format single card."""
        item = card.item
        marker = "★ " if card.is_favourite else ""
        year = f" ({item.release_date[:4]})" if item.release_date else ""

        lines = [f"### {marker}{item.title}{year}", ""]

        details = [f"id: {item.id}"]
        if item.vote_average is not None:
            details.append(f"rating: {item.vote_average:.1f}/10")
        if item.genres:
            details.append("genres: " + ", ".join(g.name for g in item.genres))
        lines.append(" | ".join(details))

        if item.overview:
            overview = item.overview
            if len(overview) > self.overview_length:
                overview = overview[: self.overview_length].rstrip() + "..."
            lines.extend(["", overview])

        if card.actions:
            labels = [
                f"**[{action.label or kind_name(action.kind)}]**" if action.active
                else f"[{action.label or kind_name(action.kind)}]"
                for action in card.actions
            ]
            lines.extend(["", " ".join(labels)])

        lines.append("")
        return lines
