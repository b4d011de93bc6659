import click
from cli.commands import bot


@click.group()
def cli():
    pass


cli.add_command(bot)
