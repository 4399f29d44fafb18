from mdquote.cli.main import main

main()
