from bbdoc.cli.main import main

main()
