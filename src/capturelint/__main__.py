from capturelint.cli.main import cli

cli()
