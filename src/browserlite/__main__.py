from browserlite.cli import main

main()
