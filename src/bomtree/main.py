import click

from bomtree.commands.config import config_group
from bomtree.commands.document import doc
from bomtree.commands.export import export
from bomtree.commands.item import item
from bomtree.utils.logger import setup_logger

setup_logger()


@click.group()
def main() -> None:
    """bomtree – equipment Bill-of-Materials tree CLI."""


main.add_command(doc)
main.add_command(item)
main.add_command(export)
main.add_command(config_group)
