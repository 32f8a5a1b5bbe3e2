from aula_click.cli import main

main()
