"""
Card Printer

Renders a PreviewCard to the terminal with rich. Useful when working on the
card layout without a widget toolkit attached.

Example Usage:
    from profile_card.form_controller import FormController
    from profile_card.utils.card_printer import print_card

    controller = FormController()
    controller.set_name("Jane Doe")
    print_card(controller.render_preview())
"""

from typing import Optional

from rich.console import Console, Group
from rich.panel import Panel
from rich.style import Style
from rich.table import Table
from rich.text import Text

from profile_card.preview import PreviewCard


def build_contacts_table(card: PreviewCard) -> Table:
    """Build the contacts table; invalid links are shown as plain text."""
    table = Table(title=card.contacts.title, show_header=False, expand=True)
    table.add_column("title", style="bold")
    table.add_column("value", justify="right")

    for row in card.contacts.rows:
        if row.is_link:
            value = Text(
                row.value, style=Style(color="blue", underline=True, link=row.url)
            )
        else:
            value = Text(row.value, style="blue")
        table.add_row(row.title, value)

    return table


def build_card_panel(card: PreviewCard) -> Panel:
    """Compose the whole card into a single rich Panel."""
    if card.avatar.is_placeholder:
        avatar = Text("[no avatar]", style="dim")
    else:
        avatar = Text("[avatar]", style="dim")
    header = Text.assemble(
        (card.header.name, "bold"), "\n", (card.header.occupation, "italic")
    )
    bio = Panel(Text(card.bio.text), title=card.bio.title, title_align="left")

    return Panel(
        Group(avatar, header, bio, build_contacts_table(card)),
        title=card.title,
    )


def print_card(card: PreviewCard, console: Optional[Console] = None) -> None:
    """Print a preview card to the console."""
    console = console or Console()
    console.print(build_card_panel(card))
