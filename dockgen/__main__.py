from dockgen.cli import cli

cli()
